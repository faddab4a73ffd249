"""College Service. 목록·상세(리뷰 합성)·생성·수정·삭제(예약/리뷰 연쇄 삭제)."""

import logging
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import transaction
from app.core.errors import NotFoundError, parse_id
from app.models.college import DEFAULT_COLLEGE_IMAGE, DEFAULT_COLLEGE_TYPE, College
from app.repositories import booking_repository, college_repository, review_repository
from app.schemas.college import CollegeCreate, CollegeDetail, CollegeUpdate
from app.schemas.review import ReviewResponse

logger = logging.getLogger(__name__)

COLLEGE_NOT_FOUND = "College not found"


async def list_colleges(
    session: AsyncSession,
    *,
    search: str | None = None,
    college_type: str | None = None,
    min_rating: float | None = None,
    sort_by: str | None = None,
) -> list[College]:
    return await college_repository.list_colleges(
        session,
        search=search,
        college_type=college_type,
        min_rating=min_rating,
        sort_by=sort_by,
    )


async def get_college_detail(session: AsyncSession, raw_id: str) -> CollegeDetail:
    """대학 + 전체 리뷰(등록 순). 대학 조회 후 리뷰를 별도 조회해 합성."""
    college_id = parse_id(raw_id, "college")
    college = await college_repository.get_by_id(session, college_id)
    if college is None:
        raise NotFoundError(COLLEGE_NOT_FOUND)
    reviews = await review_repository.list_by_college(session, college_id, newest_first=False)
    detail = CollegeDetail.model_validate(college)
    detail.reviews = [ReviewResponse.model_validate(r) for r in reviews]
    return detail


async def create_college(data: CollegeCreate) -> College:
    """선택 필드 기본값: rating 0, type University, established 올해, 리스트는 빈 배열."""
    async with transaction() as session:
        college = await college_repository.create(
            session,
            name=data.name,
            location=data.location,
            description=data.description,
            rating=data.rating or 0.0,
            image=data.image or DEFAULT_COLLEGE_IMAGE,
            type=data.type or DEFAULT_COLLEGE_TYPE,
            established=data.established or datetime.now(UTC).year,
            affiliations=data.affiliations or [],
            courses=data.courses or [],
            facilities=data.facilities or [],
            tuition_fee=data.tuition_fee or 0.0,
            gallery=data.gallery or [],
        )
    logger.info("College created: %s", college.id)
    return college


async def update_college(raw_id: str, data: CollegeUpdate) -> College:
    college_id = parse_id(raw_id, "college")
    values = data.model_dump(exclude_none=True)
    async with transaction() as session:
        college = await college_repository.get_by_id(session, college_id)
        if college is None:
            raise NotFoundError(COLLEGE_NOT_FOUND)
        return await college_repository.update(session, college, values)


async def delete_college(raw_id: str) -> None:
    """대학 삭제. 참조하는 예약·리뷰를 먼저 지운다."""
    college_id = parse_id(raw_id, "college")
    async with transaction() as session:
        college = await college_repository.get_by_id(session, college_id)
        if college is None:
            raise NotFoundError(COLLEGE_NOT_FOUND)
        bookings = await booking_repository.delete_by_college(session, college_id)
        reviews = await review_repository.delete_by_college(session, college_id)
        await college_repository.delete_by_id(session, college_id)
    logger.info(
        "College deleted: %s (bookings=%d, reviews=%d)", college_id, bookings, reviews
    )
