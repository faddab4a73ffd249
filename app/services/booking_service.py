"""Booking Service. 소유자 범위 CRUD + 관리자용 전체 조회/상태 변경. 응답은 대학(·유저)을 합성."""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import transaction
from app.core.errors import NotFoundError, parse_id
from app.models.booking import Booking
from app.repositories import booking_repository, college_repository, user_repository
from app.schemas.booking import (
    AdminBookingDetail,
    BookingCreate,
    BookingDetail,
    BookingStatusUpdate,
    BookingUpdate,
)
from app.schemas.college import CollegeResponse
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)

BOOKING_NOT_FOUND = "Booking not found"


async def _with_colleges(
    session: AsyncSession, bookings: Sequence[Booking]
) -> list[BookingDetail]:
    """예약 목록에 대학을 합성. 대학은 id 집합으로 한 번에 조회."""
    colleges = await college_repository.get_by_ids(session, {b.college_id for b in bookings})
    details = []
    for booking in bookings:
        detail = BookingDetail.model_validate(booking)
        college = colleges.get(booking.college_id)
        detail.college = CollegeResponse.model_validate(college) if college else None
        details.append(detail)
    return details


async def _with_colleges_and_users(
    session: AsyncSession, bookings: Sequence[Booking]
) -> list[AdminBookingDetail]:
    colleges = await college_repository.get_by_ids(session, {b.college_id for b in bookings})
    users = await user_repository.get_by_ids(session, {b.user_id for b in bookings})
    details = []
    for booking in bookings:
        detail = AdminBookingDetail.model_validate(booking)
        college = colleges.get(booking.college_id)
        user = users.get(booking.user_id)
        detail.college = CollegeResponse.model_validate(college) if college else None
        detail.user = UserResponse.model_validate(user) if user else None
        details.append(detail)
    return details


async def list_user_bookings(
    session: AsyncSession, user_id: uuid.UUID
) -> list[BookingDetail]:
    bookings = await booking_repository.list_by_user(session, user_id)
    return await _with_colleges(session, bookings)


async def get_user_booking(
    session: AsyncSession, user_id: uuid.UUID, raw_id: str
) -> BookingDetail:
    booking_id = parse_id(raw_id, "booking")
    booking = await booking_repository.get_by_id(session, booking_id, user_id=user_id)
    if booking is None:
        raise NotFoundError(BOOKING_NOT_FOUND)
    return (await _with_colleges(session, [booking]))[0]


async def create_booking(user_id: uuid.UUID, data: BookingCreate) -> BookingDetail:
    """대학 존재 확인 후 pending 상태로 생성."""
    college_id = parse_id(data.college_id, "college")
    async with transaction() as session:
        college = await college_repository.get_by_id(session, college_id)
        if college is None:
            raise NotFoundError("College not found")
        booking = await booking_repository.create(
            session,
            user_id=user_id,
            college_id=college_id,
            student_name=data.student_name,
            email=data.email,
            phone=data.phone,
            course=data.course,
            previous_education=data.previous_education,
            grade=data.grade,
            address=data.address,
            guardian_name=data.guardian_name,
            guardian_phone=data.guardian_phone,
            status="pending",
        )
        logger.info("Booking created: %s (college=%s)", booking.id, college_id)
        return (await _with_colleges(session, [booking]))[0]


async def update_user_booking(
    user_id: uuid.UUID, raw_id: str, data: BookingUpdate
) -> BookingDetail:
    booking_id = parse_id(raw_id, "booking")
    values = data.model_dump(exclude_none=True)
    async with transaction() as session:
        booking = await booking_repository.get_by_id(session, booking_id, user_id=user_id)
        if booking is None:
            raise NotFoundError(BOOKING_NOT_FOUND)
        booking = await booking_repository.update(session, booking, values)
        return (await _with_colleges(session, [booking]))[0]


async def delete_user_booking(user_id: uuid.UUID, raw_id: str) -> None:
    booking_id = parse_id(raw_id, "booking")
    async with transaction() as session:
        booking = await booking_repository.get_by_id(session, booking_id, user_id=user_id)
        if booking is None:
            raise NotFoundError(BOOKING_NOT_FOUND)
        await booking_repository.delete_one(session, booking)


async def list_all_bookings(session: AsyncSession) -> list[AdminBookingDetail]:
    """관리자용. 소유자 필터 없음, 최신순."""
    bookings = await booking_repository.list_all(session)
    return await _with_colleges_and_users(session, bookings)


async def update_booking_status(
    raw_id: str, data: BookingStatusUpdate
) -> AdminBookingDetail:
    """관리자용 상태 변경. 소유자 필터 없음. status가 없으면 변경 없이 현재 상태 반환."""
    booking_id = parse_id(raw_id, "booking")
    async with transaction() as session:
        booking = await booking_repository.get_by_id(session, booking_id)
        if booking is None:
            raise NotFoundError(BOOKING_NOT_FOUND)
        if data.status is not None:
            booking = await booking_repository.update(session, booking, {"status": data.status})
            logger.info("Booking %s status -> %s", booking_id, data.status)
        return (await _with_colleges_and_users(session, [booking]))[0]
