"""
관리자 API. 유효한 토큰이면 누구나 호출 가능(역할 검사 없음).
소유자 필터 없이 전체 예약 조회·상태 변경.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.booking import AdminBookingDetail, AdminBookingEnvelope, BookingStatusUpdate
from app.services import booking_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/bookings", response_model=list[AdminBookingDetail])
async def get_all_bookings(
    _user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[AdminBookingDetail]:
    return await booking_service.list_all_bookings(session)


@router.put("/bookings/{booking_id}", response_model=AdminBookingEnvelope)
async def put_booking_status(
    booking_id: str,
    payload: BookingStatusUpdate,
    _user_id: uuid.UUID = Depends(get_current_user_id),
) -> AdminBookingEnvelope:
    booking = await booking_service.update_booking_status(booking_id, payload)
    return AdminBookingEnvelope(message="Booking status updated successfully", booking=booking)
