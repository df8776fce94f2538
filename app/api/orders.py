"""주문 예제 라우터 — 추적 데코레이터로 감싼 주문 체인 호출.

Order example router — Calls the trace-decorated order chain.
Errors raised by the chain (e.g. itemId "ex") are not caught here.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.proxy.order import OrderController
from app.proxy.trace import LogTrace
from app.proxy.trace_proxy import build_order_controller

router: APIRouter = APIRouter()

# 요청 간 공유되는 체인 — 추적 ID는 ContextVar라 요청마다 분리됨
_order_controller: OrderController = build_order_controller(
    LogTrace(), delay_seconds=settings.ORDER_REPOSITORY_DELAY_SECONDS
)


def get_order_controller() -> OrderController:
    """FastAPI 의존성 — 주문 컨트롤러 체인 (Overridable in tests)."""
    return _order_controller


@router.get("/v1/request", response_class=PlainTextResponse)
def request(
    controller: Annotated[OrderController, Depends(get_order_controller)],
    item_id: Annotated[str, Query(alias="itemId")],
) -> str:
    """주문을 요청합니다 (Order an item; always "ok" unless the chain raises)."""
    return controller.request(item_id)


@router.get("/v1/no-log", response_class=PlainTextResponse)
def no_log(
    controller: Annotated[OrderController, Depends(get_order_controller)],
) -> str:
    """추적 없이 "ok"를 반환합니다 (Returns "ok" without delegating)."""
    return controller.no_log()
