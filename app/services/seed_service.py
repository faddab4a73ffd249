"""데모 데이터 시딩. seed_markers 행으로 1회만 적용(멱등)."""

import asyncio
import logging

from sqlalchemy.exc import IntegrityError

from app.core.database import transaction
from app.repositories import college_repository, review_repository, seed_marker_repository, user_repository
from app.services.auth_service import hash_password

logger = logging.getLogger(__name__)

DEMO_SEED_NAME = "demo_data_v1"

DEMO_USER = {
    "name": "Demo User",
    "email": "demo@example.com",
    "phone": "+1234567890",
    "address": "123 Demo Street, Demo City",
}
DEMO_PASSWORD = "password"

# 카탈로그 평점은 시드 값 그대로 둔다(리뷰 평균으로 재계산하지 않음).
DEMO_COLLEGES = [
    {
        "name": "Stanford University",
        "location": "Stanford, California",
        "description": (
            "A leading research university with seven schools, Stanford offers a comprehensive "
            "education in humanities, sciences, engineering, and more."
        ),
        "rating": 4.8,
        "image": "/stanford-university-campus.png",
        "type": "Private University",
        "established": 1885,
        "affiliations": ["AAU", "APRU", "Pac-12"],
        "courses": ["Computer Science", "Engineering", "Business", "Medicine", "Law"],
        "facilities": ["Library", "Labs", "Sports Complex", "Cafeteria", "Auditorium"],
        "tuition_fee": 55000,
        "gallery": [
            "/stanford-university-campus.png",
            "/university-library-interior.png",
            "/university-sports-complex.jpg",
            "/university-lab.jpg",
        ],
    },
    {
        "name": "MIT",
        "location": "Cambridge, Massachusetts",
        "description": (
            "Massachusetts Institute of Technology is a world-renowned institution focused on "
            "science, technology, and innovation."
        ),
        "rating": 4.9,
        "image": "/mit-campus.png",
        "type": "Private University",
        "established": 1861,
        "affiliations": ["AAU", "APRU", "COFHE"],
        "courses": ["Engineering", "Computer Science", "Physics", "Mathematics", "Economics"],
        "facilities": ["Research Labs", "Library", "Sports Center", "Student Center", "Maker Spaces"],
        "tuition_fee": 53000,
        "gallery": ["/mit-campus.png", "/university-lab.jpg", "/university-library-interior.png"],
    },
    {
        "name": "Harvard University",
        "location": "Cambridge, Massachusetts",
        "description": (
            "Harvard is the oldest institution of higher learning in the United States, offering "
            "unparalleled education and research opportunities."
        ),
        "rating": 4.9,
        "image": "/harvard-campus.png",
        "type": "Private University",
        "established": 1636,
        "affiliations": ["AAU", "COFHE", "Ivy League"],
        "courses": ["Law", "Medicine", "Business", "Arts & Sciences", "Engineering"],
        "facilities": [
            "Libraries",
            "Museums",
            "Research Centers",
            "Athletic Facilities",
            "Student Housing",
        ],
        "tuition_fee": 54000,
        "gallery": [
            "/harvard-campus.png",
            "/university-library-interior.png",
            "/university-sports-complex.jpg",
        ],
    },
    {
        "name": "Oxford University",
        "location": "Oxford, United Kingdom",
        "description": (
            "The University of Oxford is the oldest university in the English-speaking world with "
            "a distinguished history of scholarship."
        ),
        "rating": 4.8,
        "image": "/oxford-campus.png",
        "type": "Public University",
        "established": 1096,
        "affiliations": ["Russell Group", "European University Association"],
        "courses": ["Philosophy", "History", "Law", "Medicine", "Sciences"],
        "facilities": ["Historic Libraries", "Museums", "Research Labs", "Sports Facilities", "Theaters"],
        "tuition_fee": 45000,
        "gallery": ["/oxford-campus.png", "/university-library-interior.png"],
    },
    {
        "name": "Cambridge University",
        "location": "Cambridge, United Kingdom",
        "description": (
            "University of Cambridge is one of the world's oldest and most prestigious "
            "universities, known for academic excellence."
        ),
        "rating": 4.9,
        "image": "/cambridge-campus.png",
        "type": "Public University",
        "established": 1209,
        "affiliations": ["Russell Group", "The Golden Triangle"],
        "courses": ["Mathematics", "Natural Sciences", "Engineering", "Medicine", "Law"],
        "facilities": [
            "College Libraries",
            "Research Labs",
            "Sports Grounds",
            "Museums",
            "Concert Halls",
        ],
        "tuition_fee": 46000,
        "gallery": [
            "/cambridge-campus.png",
            "/university-library-interior.png",
            "/university-lab.jpg",
        ],
    },
    {
        "name": "UC Berkeley",
        "location": "Berkeley, California",
        "description": (
            "The University of California, Berkeley is a leading public research university with "
            "a distinguished faculty and innovative programs."
        ),
        "rating": 4.7,
        "image": "/berkeley-campus.png",
        "type": "Public University",
        "established": 1868,
        "affiliations": ["AAU", "Pac-12", "UC System"],
        "courses": [
            "Computer Science",
            "Engineering",
            "Business",
            "Social Sciences",
            "Natural Sciences",
        ],
        "facilities": [
            "Research Centers",
            "Libraries",
            "Athletic Facilities",
            "Student Union",
            "Performance Venues",
        ],
        "tuition_fee": 42000,
        "gallery": [
            "/berkeley-campus.png",
            "/university-sports-complex.jpg",
            "/university-library-interior.png",
        ],
    },
]

DEMO_REVIEW = {
    "rating": 5,
    "comment": "Excellent university with world-class facilities and faculty!",
}


async def seed_demo_data() -> bool:
    """
    데모 유저·대학 6곳·리뷰 1건 적재. 마커 INSERT와 같은 트랜잭션.
    이미 적용됐으면 비밀번호 해싱 없이 False. 다른 프로세스가 동시에 시딩해 마커가 충돌해도 False.
    """
    async with transaction() as session:
        if await seed_marker_repository.exists(session, DEMO_SEED_NAME):
            logger.info("Database already seeded (%s)", DEMO_SEED_NAME)
            return False

    password_hash = await asyncio.to_thread(hash_password, DEMO_PASSWORD)
    try:
        async with transaction() as session:
            # 해싱 사이에 다른 프로세스가 적용했으면 건너뜀
            if await seed_marker_repository.exists(session, DEMO_SEED_NAME):
                return False
            await seed_marker_repository.mark_applied(session, DEMO_SEED_NAME)

            demo_user = await user_repository.get_by_email(session, DEMO_USER["email"])
            if demo_user is None:
                demo_user = await user_repository.create(
                    session, password_hash=password_hash, auth_provider="email", **DEMO_USER
                )
            colleges = [
                await college_repository.create(session, **data) for data in DEMO_COLLEGES
            ]
            await review_repository.create(
                session,
                user_id=demo_user.id,
                college_id=colleges[0].id,
                user_name=demo_user.name or demo_user.email,
                **DEMO_REVIEW,
            )
    except IntegrityError:
        logger.info("Seed %s applied concurrently by another process", DEMO_SEED_NAME)
        return False
    logger.info("Database seeded (%s): %d colleges", DEMO_SEED_NAME, len(colleges))
    return True
