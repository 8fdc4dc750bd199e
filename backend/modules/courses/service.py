"""
Courses service implementation.

Single-course and catalog lookups follow the read-through pattern: look in
the key-value cache, fall back to the store on a miss, then populate the
cache. Writes go to the store and invalidate the affected keys.
"""

import logging
from typing import Optional

from pydantic import TypeAdapter

from shared.cache import IKeyValueCache
from shared.models import User, UserRole

from .exceptions import CourseAccessDeniedError, CourseNotFoundError
from .interfaces import ICourseService
from .models import (
    Course,
    CourseCreateRequest,
    CoursePreview,
    CourseUpdateRequest,
    Lesson,
)
from .repository import CourseRepository

logger = logging.getLogger(__name__)

ALL_COURSES_KEY = "courses:all"

_preview_list = TypeAdapter(list[CoursePreview])


def course_key(course_id: str) -> str:
    return f"course:{course_id}"


class CourseService(ICourseService):
    """Course catalog with read-through caching."""

    def __init__(
        self,
        repository: CourseRepository,
        cache: IKeyValueCache,
        cache_ttl: Optional[int] = None,
    ):
        self._repository = repository
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def get_course(self, course_id: str) -> CoursePreview:
        key = course_key(course_id)
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug(f"Course cache hit: {course_id}")
            return CoursePreview.model_validate_json(cached)

        logger.debug(f"Course cache miss: {course_id}")
        course = self._repository.get_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)

        preview = course.to_preview()
        await self._cache.set(key, preview.model_dump_json(), self._cache_ttl)
        return preview

    async def list_courses(self) -> list[CoursePreview]:
        cached = await self._cache.get(ALL_COURSES_KEY)
        if cached is not None:
            logger.debug("Course list cache hit")
            return _preview_list.validate_json(cached)

        logger.debug("Course list cache miss")
        previews = [course.to_preview() for course in self._repository.list_all()]
        await self._cache.set(
            ALL_COURSES_KEY,
            _preview_list.dump_json(previews).decode(),
            self._cache_ttl,
        )
        return previews

    async def create_course(self, request: CourseCreateRequest) -> Course:
        course = self._repository.create(request.model_dump(mode="json"))
        await self._cache.delete(ALL_COURSES_KEY)
        logger.info(f"Created course {course.id}")
        return course

    async def edit_course(self, course_id: str, request: CourseUpdateRequest) -> Course:
        changes = request.model_dump(mode="json", exclude_unset=True)
        course = self._repository.update(course_id, changes)
        if course is None:
            raise CourseNotFoundError(course_id)

        await self._invalidate(course_id)
        logger.info(f"Updated course {course_id}")
        return course

    async def delete_course(self, course_id: str) -> None:
        if not self._repository.delete(course_id):
            raise CourseNotFoundError(course_id)
        await self._invalidate(course_id)
        logger.info(f"Deleted course {course_id}")

    async def record_purchase(self, course_id: str) -> Course:
        course = self._repository.get_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)

        updated = self._repository.update(course_id, {"purchased": course.purchased + 1})
        if updated is None:
            raise CourseNotFoundError(course_id)
        await self._invalidate(course_id)
        return updated

    async def get_course_content(self, course_id: str, user: User) -> list[Lesson]:
        if user.role != UserRole.ADMIN and not user.is_enrolled(course_id):
            raise CourseAccessDeniedError(course_id)

        course = self._repository.get_by_id(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course.course_data

    async def _invalidate(self, course_id: str) -> None:
        await self._cache.delete(course_key(course_id))
        await self._cache.delete(ALL_COURSES_KEY)
