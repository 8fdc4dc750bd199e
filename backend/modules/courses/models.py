"""
Courses module data models.

A Course carries full lesson data (video URLs, links). Public lookups return
CoursePreview, which keeps the outline but drops everything that should only
reach enrolled users.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Thumbnail(BaseModel):
    public_id: Optional[str] = None
    url: Optional[str] = None


class LessonLink(BaseModel):
    title: str
    url: str


class LessonPreview(BaseModel):
    """Lesson fields visible to everyone."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    video_section: Optional[str] = None
    video_length: Optional[int] = Field(None, ge=0, description="Length in minutes")


class Lesson(LessonPreview):
    """Full lesson, visible to enrolled users and admins."""

    video_url: Optional[str] = None
    links: list[LessonLink] = Field(default_factory=list)
    suggestion: Optional[str] = None


class CourseBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    estimated_price: Optional[float] = Field(None, ge=0)
    thumbnail: Optional[Thumbnail] = None
    tags: str = ""
    level: str = ""
    demo_url: Optional[str] = None
    benefits: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)


class CourseCreateRequest(CourseBase):
    course_data: list[Lesson] = Field(default_factory=list)


NON_NULLABLE_COLUMNS = frozenset(
    {
        "name",
        "description",
        "price",
        "tags",
        "level",
        "benefits",
        "prerequisites",
        "course_data",
    }
)


class CourseUpdateRequest(BaseModel):
    """
    Partial update; only fields that are set are written.

    Fields backed by NOT NULL columns may be omitted but not sent as null.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    estimated_price: Optional[float] = Field(None, ge=0)
    thumbnail: Optional[Thumbnail] = None
    tags: Optional[str] = None
    level: Optional[str] = None
    demo_url: Optional[str] = None
    benefits: Optional[list[str]] = None
    prerequisites: Optional[list[str]] = None
    course_data: Optional[list[Lesson]] = None

    @model_validator(mode="after")
    def reject_null_required_columns(self) -> "CourseUpdateRequest":
        nulled = sorted(
            name
            for name in self.model_fields_set & NON_NULLABLE_COLUMNS
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class Course(CourseBase):
    model_config = ConfigDict(extra="ignore")

    id: str
    course_data: list[Lesson] = Field(default_factory=list)
    ratings: float = 0
    purchased: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_preview(self) -> "CoursePreview":
        return CoursePreview.model_validate(self.model_dump())


class CoursePreview(CourseBase):
    model_config = ConfigDict(extra="ignore")

    id: str
    course_data: list[LessonPreview] = Field(default_factory=list)
    ratings: float = 0
    purchased: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CourseResponse(BaseModel):
    success: bool = True
    course: CoursePreview


class CourseDetailResponse(BaseModel):
    success: bool = True
    course: Course


class CourseListResponse(BaseModel):
    success: bool = True
    courses: list[CoursePreview]


class CourseContentResponse(BaseModel):
    success: bool = True
    content: list[Lesson]
