"""Course Routes — list and create courses."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from certtrack.infrastructure.database import get_db
from certtrack.schemas.course import CourseCreate, CourseRead
from certtrack.services.store import CertificationStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseRead])
async def list_courses(db: AsyncSession = Depends(get_db)):
    return await CertificationStore(db).list_courses()


@router.post(
    "", response_model=CourseRead, status_code=status.HTTP_201_CREATED,
)
async def create_course(body: CourseCreate, db: AsyncSession = Depends(get_db)):
    logger.info(f"Creating course: {body.name}")
    course = await CertificationStore(db).add_course(body.model_dump())
    logger.info("Course created", extra={"table": "courses", "record_id": course.id})
    return course
