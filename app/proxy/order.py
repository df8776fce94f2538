"""주문 예제 — 컨트롤러 → 서비스 → 레포지토리 위임 체인.

Order example — controller → service → repository delegation chain.
Each layer depends only on the next layer's interface; logging is added
from the outside by the trace decorators in ``app.proxy.trace_proxy``.
"""

import time
from typing import Protocol


class OrderRepository(Protocol):
    def save(self, item_id: str) -> None: ...


class OrderService(Protocol):
    def order_item(self, item_id: str) -> None: ...


class OrderController(Protocol):
    def request(self, item_id: str) -> str: ...

    def no_log(self) -> str: ...


class OrderRepositoryImpl:
    """주문 저장소 — 저장은 지연만 흉내 내며 실제로 저장하지 않습니다.

    Simulated store. ``item_id == "ex"`` fails with RuntimeError.

    Attributes:
        delay_seconds: 저장 지연 시간(초) (Simulated latency)
    """

    def __init__(self, delay_seconds: float = 0.0) -> None:
        self.delay_seconds: float = delay_seconds

    def save(self, item_id: str) -> None:
        if item_id == "ex":
            raise RuntimeError("예외 발생!")
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)


class OrderServiceImpl:
    def __init__(self, order_repository: OrderRepository) -> None:
        self.order_repository: OrderRepository = order_repository

    def order_item(self, item_id: str) -> None:
        self.order_repository.save(item_id)


class OrderControllerImpl:
    """주문 컨트롤러 — 서비스에 한 번 위임하고 "ok"를 반환합니다.

    ``request()`` always delegates exactly once; ``no_log()`` never
    delegates. Service errors are not caught here.
    """

    def __init__(self, order_service: OrderService) -> None:
        self.order_service: OrderService = order_service

    def request(self, item_id: str) -> str:
        self.order_service.order_item(item_id)
        return "ok"

    def no_log(self) -> str:
        return "ok"
