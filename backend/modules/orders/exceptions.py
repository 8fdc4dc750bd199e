"""
Orders module exceptions.
"""

from shared.exceptions import ConflictError


class CourseAlreadyPurchasedError(ConflictError):
    """Raised when a user orders a course they are already enrolled in."""

    def __init__(self, course_id: str):
        super().__init__(
            "You have already purchased this course",
            code="COURSE_ALREADY_PURCHASED",
            details={"course_id": course_id},
        )
