"""
Shared data models used across modules.

The identity record is shared by auth (sessions), users (profile/admin) and
courses (enrolment checks), so it lives here rather than in one module.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRole(str, Enum):
    """Roles an identity can hold."""

    USER = "user"
    ADMIN = "admin"


class Avatar(BaseModel):
    """Reference to an avatar hosted on the image service."""

    public_id: Optional[str] = None
    url: Optional[str] = None


class EnrolledCourse(BaseModel):
    """Reference to a course the user has purchased."""

    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(..., alias="courseId")


class User(BaseModel):
    """
    Identity record.

    ``password`` holds the argon2 hash. It is populated only on the login
    query path and in session cache snapshots; public responses go through
    ``to_public()`` which never includes it.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: Optional[str] = Field(None, repr=False, description="Password hash")
    avatar: Optional[Avatar] = None
    role: UserRole = UserRole.USER
    is_verified: bool = False
    courses: list[EnrolledCourse] = Field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_public(self) -> "UserPublic":
        """Project the record to its client-facing view."""
        return UserPublic.model_validate(self.model_dump(exclude={"password"}))

    def is_enrolled(self, course_id: str) -> bool:
        return any(c.course_id == course_id for c in self.courses)


class UserPublic(BaseModel):
    """Client-facing view of an identity record (no password hash)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: EmailStr
    avatar: Optional[Avatar] = None
    role: UserRole = UserRole.USER
    is_verified: bool = False
    courses: list[EnrolledCourse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
