"""Hello 라우터 — 가장 단순한 응답 예제.

Hello Router — Fixed-string and echo-DTO endpoints.
"""

import re

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.schemas.hello import HelloResponseDto
from app.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()

# ASCII 10진 정수만 허용 — "1_000", " 1000 ", 전각 숫자 거부
_AMOUNT_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    """고정 문자열 "hello"를 반환합니다."""
    return "hello"


@router.get("/hello/dto", response_model=HelloResponseDto)
async def hello_dto(name: str | None = None, amount: str | None = None) -> HelloResponseDto:
    """이름과 금액을 그대로 돌려줍니다.

    Echo ``name`` and ``amount``; amount must be a plain decimal integer.

    Raises:
        BadRequestError(400): 파라미터 누락 또는 amount가 정수가 아닐 때
                              (Missing parameter or malformed amount)
    """
    if name is None:
        raise BadRequestError("name is required")
    if amount is None:
        raise BadRequestError("amount is required")
    if _AMOUNT_PATTERN.fullmatch(amount) is None:
        raise BadRequestError(f"amount must be an integer: {amount!r}")
    return HelloResponseDto(name=name, amount=int(amount))
