"""주문 체인 및 호출 추적 테스트.

Order chain and call-trace tests.
Tests delegation counts, trace log lines, failure propagation and the
HTTP endpoints in front of the chain.
"""

import contextvars
import logging

import pytest
from httpx import AsyncClient

from app.api.orders import get_order_controller
from app.main import app
from app.proxy.order import OrderControllerImpl, OrderRepositoryImpl, OrderServiceImpl
from app.proxy.trace import LogTrace, TraceId
from app.proxy.trace_proxy import OrderControllerTraceProxy, build_order_controller

TRACE_LOGGER = "app.proxy.trace"


class RecordingOrderService:
    """order_item 호출을 기록하는 가짜 서비스."""

    def __init__(self) -> None:
        self.items: list[str] = []

    def order_item(self, item_id: str) -> None:
        self.items.append(item_id)


def _trace_lines(caplog) -> list[str]:
    """추적 ID를 뗀 로그 본문 (Trace messages without the "[id] " prefix)."""
    return [r.getMessage().split(" ", 1)[1] for r in caplog.records if r.name == TRACE_LOGGER]


class TestOrderController:
    """컨트롤러 위임 테스트."""

    def test_request_delegates_once(self):
        """request는 서비스에 정확히 한 번 위임하고 "ok" 반환."""
        service = RecordingOrderService()
        controller = OrderControllerImpl(service)

        assert controller.request("itemA") == "ok"
        assert service.items == ["itemA"]

    def test_no_log_never_delegates(self):
        """no_log는 위임 없이 "ok" 반환."""
        service = RecordingOrderService()
        controller = OrderControllerTraceProxy(OrderControllerImpl(service), LogTrace())

        assert controller.no_log() == "ok"
        assert service.items == []

    def test_service_delegates_to_repository(self):
        """서비스는 레포지토리에 위임, "ex"는 RuntimeError."""
        service = OrderServiceImpl(OrderRepositoryImpl())
        service.order_item("itemA")
        with pytest.raises(RuntimeError, match="예외 발생!"):
            service.order_item("ex")


class TestLogTrace:
    """추적 로그 테스트."""

    def test_trace_lines_for_request(self, caplog):
        """컨트롤러 → 서비스 → 레포지토리 순서와 깊이가 로그에 남음."""
        trace = LogTrace()
        controller = build_order_controller(trace)

        with caplog.at_level(logging.INFO, logger=TRACE_LOGGER):
            assert controller.request("itemA") == "ok"

        lines = _trace_lines(caplog)
        assert len(lines) == 6
        assert lines[0] == "OrderController.request()"
        assert lines[1] == "|-->OrderService.orderItem()"
        assert lines[2] == "|   |-->OrderRepository.save()"
        assert lines[3].startswith("|   |<--OrderRepository.save() time=")
        assert lines[4].startswith("|<--OrderService.orderItem() time=")
        assert lines[5].startswith("OrderController.request() time=")

        # 같은 요청은 같은 추적 ID를 공유
        ids = {r.getMessage().split(" ", 1)[0] for r in caplog.records if r.name == TRACE_LOGGER}
        assert len(ids) == 1
        assert trace.current() is None

    def test_no_log_writes_nothing(self, caplog):
        """no_log는 추적 로그를 남기지 않음."""
        controller = build_order_controller(LogTrace())

        with caplog.at_level(logging.INFO, logger=TRACE_LOGGER):
            controller.no_log()

        assert _trace_lines(caplog) == []

    def test_exception_is_logged_and_propagated(self, caplog):
        """저장 실패는 <X- 로그를 남기고 그대로 전파됨."""
        trace = LogTrace()
        controller = build_order_controller(trace)

        with caplog.at_level(logging.INFO, logger=TRACE_LOGGER):
            with pytest.raises(RuntimeError, match="예외 발생!"):
                controller.request("ex")

        lines = _trace_lines(caplog)
        assert lines[3].startswith("|   |<X-OrderRepository.save() time=")
        assert lines[4].startswith("|<X-OrderService.orderItem() time=")
        assert lines[5].startswith("OrderController.request() time=")
        assert "ex=RuntimeError" in lines[5]
        assert trace.current() is None

    def test_separate_requests_get_separate_ids(self, caplog):
        """요청마다 새 추적 ID."""
        controller = build_order_controller(LogTrace())

        with caplog.at_level(logging.INFO, logger=TRACE_LOGGER):
            controller.request("a")
            controller.request("b")

        ids = [r.getMessage().split(" ", 1)[0] for r in caplog.records if r.name == TRACE_LOGGER]
        assert ids[0] == ids[5]
        assert ids[6] == ids[11]
        assert ids[0] != ids[6]

    def test_trace_id_does_not_leak_across_contexts(self):
        """다른 컨텍스트에서 시작된 추적은 현재 컨텍스트에 보이지 않음."""
        trace = LogTrace()
        contextvars.copy_context().run(trace.begin, "other request")
        assert trace.current() is None

    def test_trace_id_levels(self):
        """깊이 증가/감소는 ID를 유지."""
        trace_id = TraceId.new()
        child = trace_id.create_next_id()
        assert child.id == trace_id.id
        assert child.level == 1
        assert child.create_previous_id().is_first_level()


class TestOrderEndpoints:
    """주문 엔드포인트 테스트 — 로그인 없이 접근 가능."""

    async def test_request(self, client: AsyncClient):
        """/v1/request는 "ok"."""
        res = await client.get("/v1/request", params={"itemId": "itemA"})
        assert res.status_code == 200
        assert res.text == "ok"

    async def test_no_log(self, client: AsyncClient):
        """/v1/no-log는 "ok"."""
        res = await client.get("/v1/no-log")
        assert res.status_code == 200
        assert res.text == "ok"

    async def test_request_delegates_item_id(self, client: AsyncClient):
        """itemId가 서비스까지 그대로 전달됨."""
        service = RecordingOrderService()
        app.dependency_overrides[get_order_controller] = lambda: OrderControllerImpl(service)

        res = await client.get("/v1/request", params={"itemId": "itemB"})
        assert res.text == "ok"
        assert service.items == ["itemB"]

    async def test_request_missing_item_id(self, client: AsyncClient):
        """itemId 누락은 422."""
        res = await client.get("/v1/request")
        assert res.status_code == 422
