"""Hello 응답 스키마.

Hello DTO echoed back by GET /hello/dto.
"""

from pydantic import BaseModel


class HelloResponseDto(BaseModel):
    """이름과 금액을 그대로 돌려주는 응답 (Echo of the name/amount query)."""

    name: str
    amount: int
