"""
Courses module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import User

from .models import (
    Course,
    CourseCreateRequest,
    CoursePreview,
    CourseUpdateRequest,
    Lesson,
)


@runtime_checkable
class ICourseService(Protocol):
    """
    Interface for course catalog operations.

    Public lookups are served read-through from the key-value cache.
    """

    async def get_course(self, course_id: str) -> CoursePreview:
        """
        Get a course outline.

        Raises:
            CourseNotFoundError: If the course doesn't exist
        """
        ...

    async def list_courses(self) -> list[CoursePreview]:
        ...

    async def create_course(self, request: CourseCreateRequest) -> Course:
        ...

    async def edit_course(self, course_id: str, request: CourseUpdateRequest) -> Course:
        ...

    async def delete_course(self, course_id: str) -> None:
        ...

    async def record_purchase(self, course_id: str) -> Course:
        """Increment the purchase count of a course."""
        ...

    async def get_course_content(self, course_id: str, user: User) -> list[Lesson]:
        """
        Get full lesson data for an enrolled user.

        Raises:
            CourseAccessDeniedError: If the user is not enrolled (admins always are)
            CourseNotFoundError: If the course doesn't exist
        """
        ...
