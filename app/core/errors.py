"""도메인 예외. 서비스 레이어에서 raise, app.main 전역 핸들러가 {"error": message}로 변환."""

import uuid


class ServiceError(Exception):
    """서비스 예외 베이스. status_code는 하위 클래스에서 지정."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """입력 누락·형식 오류·중복(이메일, 리뷰)."""

    status_code = 400


class UnauthorizedError(ServiceError):
    """토큰 누락 또는 자격 증명 불일치."""

    status_code = 401


class ForbiddenError(ServiceError):
    """토큰 서명·만료 검증 실패."""

    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


def parse_id(raw: str | None, label: str) -> uuid.UUID:
    """경로/바디의 식별자 문자열을 UUID로 변환. 형식 오류면 'Invalid <label> ID'."""
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError):
        raise BadRequestError(f"Invalid {label} ID") from None
