"""Booking API. 모든 경로가 토큰 필요, 요청자 소유 예약만 다룬다."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.booking import BookingCreate, BookingDetail, BookingEnvelope, BookingUpdate
from app.schemas.common import MessageResponse
from app.services import booking_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingDetail])
async def get_bookings(
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[BookingDetail]:
    return await booking_service.list_user_bookings(session, user_id)


@router.get("/{booking_id}", response_model=BookingDetail)
async def get_booking(
    booking_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> BookingDetail:
    return await booking_service.get_user_booking(session, user_id, booking_id)


@router.post("", response_model=BookingEnvelope, status_code=201)
async def post_booking(
    payload: BookingCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> BookingEnvelope:
    booking = await booking_service.create_booking(user_id, payload)
    return BookingEnvelope(message="Booking created successfully", booking=booking)


@router.put("/{booking_id}", response_model=BookingEnvelope)
async def put_booking(
    booking_id: str,
    payload: BookingUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> BookingEnvelope:
    booking = await booking_service.update_user_booking(user_id, booking_id, payload)
    return BookingEnvelope(message="Booking updated successfully", booking=booking)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> MessageResponse:
    await booking_service.delete_user_booking(user_id, booking_id)
    return MessageResponse(message="Booking deleted successfully")
