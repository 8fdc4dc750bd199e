"""
Courses module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class CourseNotFoundError(NotFoundError):
    """Raised when a course is not found."""

    def __init__(self, course_id: str):
        super().__init__(
            f"Course not found: {course_id}",
            code="COURSE_NOT_FOUND",
            details={"course_id": course_id},
        )


class CourseAccessDeniedError(AuthorizationError):
    """Raised when a user requests content of a course they are not enrolled in."""

    def __init__(self, course_id: str):
        super().__init__(
            "You are not eligible to access this course",
            code="COURSE_ACCESS_DENIED",
            details={"course_id": course_id},
        )
