"""호출 추적 로그 — 트랜잭션 ID와 호출 깊이를 표시하는 로그 추적기.

Call-trace logging. Each top-level call gets a short trace id; nested calls
share it and are indented by depth:

    [a1b2c3d4] OrderController.request()
    [a1b2c3d4] |-->OrderService.orderItem()
    [a1b2c3d4] |   |-->OrderRepository.save()
    [a1b2c3d4] |   |<--OrderRepository.save() time=1004ms
    [a1b2c3d4] |<--OrderService.orderItem() time=1014ms
    [a1b2c3d4] OrderController.request() time=1016ms

Failures log with the "<X-" prefix and the exception. The current trace id
lives in a ContextVar, so concurrent requests never share one.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

START_PREFIX: str = "-->"
COMPLETE_PREFIX: str = "<--"
EX_PREFIX: str = "<X-"


class TraceId(BaseModel):
    """추적 ID — 같은 요청 안에서 공유되는 ID와 현재 깊이.

    Attributes:
        id: 8자리 추적 ID (Short trace id)
        level: 호출 깊이, 0부터 시작 (Call depth, 0-based)
    """

    model_config = {"frozen": True}

    id: str
    level: int = 0

    @classmethod
    def new(cls) -> "TraceId":
        return cls(id=uuid.uuid4().hex[:8])

    def create_next_id(self) -> "TraceId":
        return TraceId(id=self.id, level=self.level + 1)

    def create_previous_id(self) -> "TraceId":
        return TraceId(id=self.id, level=self.level - 1)

    def is_first_level(self) -> bool:
        return self.level == 0


class TraceStatus(BaseModel):
    """begin()이 반환하고 end()/exception()이 받는 상태 (Handle returned by begin())."""

    model_config = {"frozen": True}

    trace_id: TraceId
    start_time_ms: int
    message: str


def _now_ms() -> int:
    return time.perf_counter_ns() // 1_000_000


def _add_space(prefix: str, level: int) -> str:
    return "".join(f"|{prefix}" if i == level - 1 else "|   " for i in range(level))


class LogTrace:
    """로그 추적기.

    Usage:
        status = trace.begin("OrderService.orderItem()")
        try:
            ...
            trace.end(status)
        except Exception as e:
            trace.exception(status, e)
            raise
    """

    def __init__(self, name: str = "log_trace") -> None:
        self._holder: ContextVar[TraceId | None] = ContextVar(f"{name}_trace_id", default=None)

    def begin(self, message: str) -> TraceStatus:
        """호출 시작을 기록합니다 (Record the start of a call)."""
        trace_id: TraceId = self._sync_trace_id()
        logger.info("[%s] %s%s", trace_id.id, _add_space(START_PREFIX, trace_id.level), message)
        return TraceStatus(trace_id=trace_id, start_time_ms=_now_ms(), message=message)

    def end(self, status: TraceStatus) -> None:
        """정상 종료를 기록합니다 (Record a normal completion)."""
        self._complete(status, None)

    def exception(self, status: TraceStatus, e: BaseException) -> None:
        """예외 종료를 기록합니다 (Record a failed completion)."""
        self._complete(status, e)

    def current(self) -> TraceId | None:
        """현재 컨텍스트의 추적 ID (Trace id of the current context, if any)."""
        return self._holder.get()

    def _complete(self, status: TraceStatus, e: BaseException | None) -> None:
        elapsed_ms: int = _now_ms() - status.start_time_ms
        trace_id: TraceId = status.trace_id
        if e is None:
            logger.info(
                "[%s] %s%s time=%dms",
                trace_id.id, _add_space(COMPLETE_PREFIX, trace_id.level), status.message, elapsed_ms,
            )
        else:
            logger.info(
                "[%s] %s%s time=%dms ex=%r",
                trace_id.id, _add_space(EX_PREFIX, trace_id.level), status.message, elapsed_ms, e,
            )
        self._release_trace_id()

    def _sync_trace_id(self) -> TraceId:
        trace_id: TraceId | None = self._holder.get()
        trace_id = TraceId.new() if trace_id is None else trace_id.create_next_id()
        self._holder.set(trace_id)
        return trace_id

    def _release_trace_id(self) -> None:
        trace_id: TraceId | None = self._holder.get()
        if trace_id is None or trace_id.is_first_level():
            self._holder.set(None)
        else:
            self._holder.set(trace_id.create_previous_id())
