"""Review Service. 리뷰 CRUD와 대학 평균 평점 재계산."""

import logging
import uuid
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import transaction
from app.core.errors import BadRequestError, NotFoundError, parse_id
from app.models.review import Review
from app.repositories import college_repository, review_repository, user_repository
from app.schemas.college import CollegeResponse, ReviewWithCollege
from app.schemas.review import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)

REVIEW_NOT_FOUND = "Review not found"
ALREADY_REVIEWED = "You have already reviewed this college"


def average_rating(ratings: Iterable[int]) -> float:
    """산술 평균을 소수점 1자리로 반올림(half-up). 리뷰가 없으면 0."""
    values = list(ratings)
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


async def recompute_college_rating(session: AsyncSession, college_id: uuid.UUID) -> float:
    """
    대학의 전체 리뷰 평점을 다시 읽어 평균 저장.
    동시 리뷰 작성과 경합하면 마지막 쓰기가 남는다(잠금 없음).
    """
    ratings = await review_repository.list_ratings(session, college_id)
    rating = average_rating(ratings)
    await college_repository.set_rating(session, college_id, rating)
    return rating


async def list_college_reviews(session: AsyncSession, raw_college_id: str) -> list[Review]:
    college_id = parse_id(raw_college_id, "college")
    return await review_repository.list_by_college(session, college_id)


async def list_user_reviews(
    session: AsyncSession, user_id: uuid.UUID
) -> list[ReviewWithCollege]:
    """내 리뷰 최신순. 대학은 id 집합으로 한 번에 조회해 합성."""
    reviews = await review_repository.list_by_user(session, user_id)
    colleges = await college_repository.get_by_ids(session, {r.college_id for r in reviews})
    details = []
    for review in reviews:
        detail = ReviewWithCollege.model_validate(review)
        college = colleges.get(review.college_id)
        detail.college = CollegeResponse.model_validate(college) if college else None
        details.append(detail)
    return details


async def create_review(user_id: uuid.UUID, data: ReviewCreate) -> Review:
    """
    1. 대학·유저 존재 확인
    2. 유저당 대학 1건 검사
    3. 리뷰 생성 (user_name은 작성 시점 이름, 없으면 이메일)
    4. 대학 평균 재계산
    """
    college_id = parse_id(data.college_id, "college")
    try:
        async with transaction() as session:
            college = await college_repository.get_by_id(session, college_id)
            if college is None:
                raise NotFoundError("College not found")
            user = await user_repository.get_by_id(session, user_id)
            if user is None:
                raise NotFoundError("User not found")
            existing = await review_repository.get_by_user_and_college(
                session, user_id, college_id
            )
            if existing is not None:
                raise BadRequestError(ALREADY_REVIEWED)

            review = await review_repository.create(
                session,
                user_id=user_id,
                college_id=college_id,
                user_name=user.name or user.email,
                rating=data.rating,
                comment=data.comment,
            )
            rating = await recompute_college_rating(session, college_id)
    except IntegrityError as e:
        raise BadRequestError(ALREADY_REVIEWED) from e
    logger.info("Review %s created; college %s rating=%.1f", review.id, college_id, rating)
    return review


async def update_review(user_id: uuid.UUID, raw_id: str, data: ReviewUpdate) -> Review:
    review_id = parse_id(raw_id, "review")
    values = data.model_dump(exclude_none=True)
    if "comment" in values and not values["comment"].strip():
        del values["comment"]
    async with transaction() as session:
        review = await review_repository.get_by_id(session, review_id, user_id=user_id)
        if review is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        review = await review_repository.update(session, review, values)
        await recompute_college_rating(session, review.college_id)
        return review


async def delete_review(user_id: uuid.UUID, raw_id: str) -> None:
    """삭제 후 평균 재계산. 남은 리뷰가 없으면 0."""
    review_id = parse_id(raw_id, "review")
    async with transaction() as session:
        review = await review_repository.get_by_id(session, review_id, user_id=user_id)
        if review is None:
            raise NotFoundError(REVIEW_NOT_FOUND)
        college_id = review.college_id
        await review_repository.delete_one(session, review)
        await recompute_college_rating(session, college_id)
