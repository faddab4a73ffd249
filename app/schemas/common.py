"""공통 스키마 베이스. 와이어 포맷은 camelCase, 파이썬 속성은 snake_case."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """요청/응답 공통 베이스. alias로 camelCase 입출력, 필드명으로도 생성 가능."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(ApiModel):
    message: str


def is_blank(value: Any) -> bool:
    """None, 빈 문자열, 공백 문자열이면 True. 필수 입력 존재 여부 검사용."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
