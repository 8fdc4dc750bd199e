"""
Course catalog endpoints.

Outline lookups are public and cached; writes are admin-only; full lesson
content requires enrolment.
"""

from fastapi import APIRouter, Depends

from shared.models import User
from modules.courses.interfaces import ICourseService
from modules.courses.models import (
    CourseContentResponse,
    CourseCreateRequest,
    CourseDetailResponse,
    CourseListResponse,
    CourseResponse,
    CourseUpdateRequest,
)
from modules.users.models import MessageResponse

from ..dependencies import get_course_service
from ..middleware.auth import get_current_user, require_admin

router = APIRouter()


@router.get("/get-course/{course_id}", response_model=CourseResponse)
async def get_single_course(
    course_id: str,
    service: ICourseService = Depends(get_course_service),
) -> CourseResponse:
    return CourseResponse(course=await service.get_course(course_id))


@router.get("/get-courses", response_model=CourseListResponse)
async def get_all_courses(
    service: ICourseService = Depends(get_course_service),
) -> CourseListResponse:
    return CourseListResponse(courses=await service.list_courses())


@router.get("/get-course-content/{course_id}", response_model=CourseContentResponse)
async def get_course_content(
    course_id: str,
    user: User = Depends(get_current_user),
    service: ICourseService = Depends(get_course_service),
) -> CourseContentResponse:
    """Full lessons for a course the caller is enrolled in."""
    content = await service.get_course_content(course_id, user)
    return CourseContentResponse(content=content)


@router.post("/create-course", response_model=CourseDetailResponse, status_code=201)
async def create_course(
    request: CourseCreateRequest,
    admin: User = Depends(require_admin),
    service: ICourseService = Depends(get_course_service),
) -> CourseDetailResponse:
    return CourseDetailResponse(course=await service.create_course(request))


@router.put("/edit-course/{course_id}", response_model=CourseDetailResponse)
async def edit_course(
    course_id: str,
    request: CourseUpdateRequest,
    admin: User = Depends(require_admin),
    service: ICourseService = Depends(get_course_service),
) -> CourseDetailResponse:
    return CourseDetailResponse(course=await service.edit_course(course_id, request))


@router.delete("/delete-course/{course_id}", response_model=MessageResponse)
async def delete_course(
    course_id: str,
    admin: User = Depends(require_admin),
    service: ICourseService = Depends(get_course_service),
) -> MessageResponse:
    await service.delete_course(course_id)
    return MessageResponse(message="Course deleted successfully")
