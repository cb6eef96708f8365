"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared across API domains.
Request/response bodies use camelCase on the wire (confirmPassword,
concertName, ...) and snake_case attributes in Python.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 베이스 모델.

    Base model exposing camelCase aliases while accepting either the alias
    or the field name on input. ORM instances can be validated directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마 (Generic confirmation message)."""

    message: str


class SuccessResponse(BaseModel):
    """성공 여부 + 메시지 응답 스키마.

    Response used by user-facing mutations, e.g. {"success": true, "message": "수정성공"}.
    """

    success: bool = True
    message: str
