# ORM models
from app.models.base import Base
from app.models.booking import Booking
from app.models.college import College
from app.models.review import Review
from app.models.seed_marker import SeedMarker
from app.models.user import User

__all__ = [
    "Base",
    "Booking",
    "College",
    "Review",
    "SeedMarker",
    "User",
]
