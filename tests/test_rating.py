"""평균 평점 계산 단위 테스트."""

import pytest

from app.services.review_service import average_rating


def test_no_reviews_is_zero() -> None:
    assert average_rating([]) == 0.0


@pytest.mark.parametrize(
    ("ratings", "expected"),
    [
        ([5], 5.0),
        ([5, 3], 4.0),
        ([4, 4, 5], 4.3),
        ([1, 2], 1.5),
        ([5, 5, 4, 3], 4.3),  # 4.25 → half-up
        ([1, 1, 2], 1.3),
    ],
)
def test_mean_rounded_to_one_decimal(ratings: list[int], expected: float) -> None:
    assert average_rating(ratings) == expected
