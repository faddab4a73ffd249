# Pydantic schemas
from app.schemas.auth import (
    AuthResponse,
    GoogleLoginRequest,
    LoginRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    RegisterRequest,
)
from app.schemas.booking import (
    AdminBookingDetail,
    AdminBookingEnvelope,
    BookingCreate,
    BookingDetail,
    BookingEnvelope,
    BookingResponse,
    BookingStatusUpdate,
    BookingUpdate,
)
from app.schemas.college import (
    CollegeCreate,
    CollegeDetail,
    CollegeEnvelope,
    CollegeResponse,
    CollegeUpdate,
    ReviewEnvelope,
    ReviewWithCollege,
)
from app.schemas.common import ApiModel, MessageResponse
from app.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from app.schemas.user import UserResponse

__all__ = [
    "AdminBookingDetail",
    "AdminBookingEnvelope",
    "ApiModel",
    "AuthResponse",
    "BookingCreate",
    "BookingDetail",
    "BookingEnvelope",
    "BookingResponse",
    "BookingStatusUpdate",
    "BookingUpdate",
    "CollegeCreate",
    "CollegeDetail",
    "CollegeEnvelope",
    "CollegeResponse",
    "CollegeUpdate",
    "GoogleLoginRequest",
    "LoginRequest",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewEnvelope",
    "ReviewResponse",
    "ReviewUpdate",
    "ReviewWithCollege",
    "UserResponse",
]
