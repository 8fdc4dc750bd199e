"""
Courses module.

Course catalog with read-through caching and enrolment-gated lesson content.

Public API:
- ICourseService: Catalog lookups, admin writes and content access
- Courses exceptions: CourseNotFoundError, CourseAccessDeniedError
"""

from .interfaces import ICourseService
from .exceptions import CourseNotFoundError, CourseAccessDeniedError

__all__ = [
    "ICourseService",
    "CourseNotFoundError",
    "CourseAccessDeniedError",
]
