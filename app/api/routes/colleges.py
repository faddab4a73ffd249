"""College API. 목록·상세는 공개, 생성·수정·삭제는 토큰 필요(역할 검사 없음)."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.college import (
    CollegeCreate,
    CollegeDetail,
    CollegeEnvelope,
    CollegeResponse,
    CollegeUpdate,
)
from app.schemas.common import MessageResponse
from app.services import college_service

router = APIRouter(prefix="/colleges", tags=["colleges"])


@router.get("", response_model=list[CollegeResponse])
async def get_colleges(
    search: str | None = Query(None, description="이름 또는 위치 부분 일치(대소문자 무시)"),
    type: str | None = Query(None, description="대학 유형 정확히 일치"),
    min_rating: float | None = Query(None, alias="minRating", description="최소 평점(포함)"),
    sort_by: str | None = Query(None, alias="sortBy", description="rating | name | tuition"),
    session: AsyncSession = Depends(get_db),
) -> list[CollegeResponse]:
    colleges = await college_service.list_colleges(
        session,
        search=search,
        college_type=type,
        min_rating=min_rating,
        sort_by=sort_by,
    )
    return [CollegeResponse.model_validate(c) for c in colleges]


@router.get("/{college_id}", response_model=CollegeDetail)
async def get_college(
    college_id: str,
    session: AsyncSession = Depends(get_db),
) -> CollegeDetail:
    return await college_service.get_college_detail(session, college_id)


@router.post("", response_model=CollegeEnvelope, status_code=201)
async def post_college(
    payload: CollegeCreate,
    _user_id: uuid.UUID = Depends(get_current_user_id),
) -> CollegeEnvelope:
    college = await college_service.create_college(payload)
    return CollegeEnvelope(
        message="College created successfully",
        college=CollegeResponse.model_validate(college),
    )


@router.put("/{college_id}", response_model=CollegeEnvelope)
async def put_college(
    college_id: str,
    payload: CollegeUpdate,
    _user_id: uuid.UUID = Depends(get_current_user_id),
) -> CollegeEnvelope:
    college = await college_service.update_college(college_id, payload)
    return CollegeEnvelope(
        message="College updated successfully",
        college=CollegeResponse.model_validate(college),
    )


@router.delete("/{college_id}", response_model=MessageResponse)
async def delete_college(
    college_id: str,
    _user_id: uuid.UUID = Depends(get_current_user_id),
) -> MessageResponse:
    """대학과 이 대학을 참조하는 예약·리뷰 삭제."""
    await college_service.delete_college(college_id)
    return MessageResponse(message="College deleted successfully")
