"""Review API. 대학별 목록은 공개, 나머지는 토큰 필요. 변경 시 대학 평균 평점 재계산."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.college import ReviewEnvelope, ReviewWithCollege
from app.schemas.common import MessageResponse
from app.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from app.services import review_service

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/college/{college_id}", response_model=list[ReviewResponse])
async def get_college_reviews(
    college_id: str,
    session: AsyncSession = Depends(get_db),
) -> list[ReviewResponse]:
    reviews = await review_service.list_college_reviews(session, college_id)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get("/user", response_model=list[ReviewWithCollege])
async def get_my_reviews(
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[ReviewWithCollege]:
    return await review_service.list_user_reviews(session, user_id)


@router.post("", response_model=ReviewEnvelope, status_code=201)
async def post_review(
    payload: ReviewCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> ReviewEnvelope:
    review = await review_service.create_review(user_id, payload)
    return ReviewEnvelope(
        message="Review created successfully",
        review=ReviewResponse.model_validate(review),
    )


@router.put("/{review_id}", response_model=ReviewEnvelope)
async def put_review(
    review_id: str,
    payload: ReviewUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> ReviewEnvelope:
    review = await review_service.update_review(user_id, review_id, payload)
    return ReviewEnvelope(
        message="Review updated successfully",
        review=ReviewResponse.model_validate(review),
    )


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> MessageResponse:
    await review_service.delete_review(user_id, review_id)
    return MessageResponse(message="Review deleted successfully")
