"""주문 체인 추적 데코레이터 — 같은 인터페이스를 구현하는 래퍼.

Trace decorators for the order chain. Each wraps a target implementing the
same interface, forwarding the call between ``LogTrace.begin`` and
``LogTrace.end`` (or ``exception``, re-raising). Callers hold the wrapper,
never the concrete target, so every call passes through the trace.
"""

from app.proxy.order import (
    OrderController,
    OrderControllerImpl,
    OrderRepository,
    OrderRepositoryImpl,
    OrderService,
    OrderServiceImpl,
)
from app.proxy.trace import LogTrace, TraceStatus


class OrderRepositoryTraceProxy:
    def __init__(self, target: OrderRepository, log_trace: LogTrace) -> None:
        self.target: OrderRepository = target
        self.log_trace: LogTrace = log_trace

    def save(self, item_id: str) -> None:
        status: TraceStatus = self.log_trace.begin("OrderRepository.save()")
        try:
            self.target.save(item_id)
        except Exception as e:
            self.log_trace.exception(status, e)
            raise
        self.log_trace.end(status)


class OrderServiceTraceProxy:
    def __init__(self, target: OrderService, log_trace: LogTrace) -> None:
        self.target: OrderService = target
        self.log_trace: LogTrace = log_trace

    def order_item(self, item_id: str) -> None:
        status: TraceStatus = self.log_trace.begin("OrderService.orderItem()")
        try:
            self.target.order_item(item_id)
        except Exception as e:
            self.log_trace.exception(status, e)
            raise
        self.log_trace.end(status)


class OrderControllerTraceProxy:
    """컨트롤러 추적 데코레이터 — ``no_log()``는 추적 없이 그대로 위임."""

    def __init__(self, target: OrderController, log_trace: LogTrace) -> None:
        self.target: OrderController = target
        self.log_trace: LogTrace = log_trace

    def request(self, item_id: str) -> str:
        status: TraceStatus = self.log_trace.begin("OrderController.request()")
        try:
            result: str = self.target.request(item_id)
        except Exception as e:
            self.log_trace.exception(status, e)
            raise
        self.log_trace.end(status)
        return result

    def no_log(self) -> str:
        return self.target.no_log()


def build_order_controller(log_trace: LogTrace, delay_seconds: float = 0.0) -> OrderController:
    """추적 데코레이터로 감싼 주문 체인을 조립합니다.

    Compose the order chain with a trace decorator around every layer.

    Args:
        log_trace: 공유 로그 추적기 (Shared trace logger)
        delay_seconds: 레포지토리 지연 시간(초) (Repository latency)

    Returns:
        OrderController: 가장 바깥 컨트롤러 래퍼 (Outermost controller wrapper)
    """
    repository = OrderRepositoryTraceProxy(OrderRepositoryImpl(delay_seconds), log_trace)
    service = OrderServiceTraceProxy(OrderServiceImpl(repository), log_trace)
    return OrderControllerTraceProxy(OrderControllerImpl(service), log_trace)
