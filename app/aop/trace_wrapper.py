"""메서드 이름 필터 기반 추적 래퍼.

Generic trace wrapper. Forwards attribute access to its target and, for
public methods whose name matches one of the fnmatch patterns, records a
``[trace] Class.method`` entry before the call and a completion entry after
it. Non-matching methods are forwarded untouched.

    wrapped = TraceWrapper(InternalService(), patterns=("internal*",))
"""

import fnmatch
import functools
import logging
from collections import deque
from typing import Any, Callable

logger = logging.getLogger(__name__)


class TraceWrapper:
    """추적 래퍼.

    Attributes:
        target: 감싼 대상 (Wrapped object)
        patterns: 추적할 메서드 이름 패턴 (Method-name patterns to trace, "*" = all)
        calls: 최근 추적된 호출 기록 (Names of the most recent traced calls,
               oldest first, capped at ``max_calls``)
    """

    def __init__(self, target: Any, patterns: tuple[str, ...] = ("*",), max_calls: int = 1000) -> None:
        # __getattr__ 재귀를 피하기 위해 __dict__에 직접 기록
        self.__dict__["target"] = target
        self.__dict__["patterns"] = patterns
        self.__dict__["calls"] = deque(maxlen=max_calls)

    def _matches(self, name: str) -> bool:
        return not name.startswith("_") and any(fnmatch.fnmatchcase(name, p) for p in self.patterns)

    def __getattr__(self, name: str) -> Any:
        attr: Any = getattr(self.target, name)
        if not callable(attr) or not self._matches(name):
            return attr
        return self._traced(name, attr)

    def _traced(self, name: str, method: Callable[..., Any]) -> Callable[..., Any]:
        signature: str = f"{type(self.target).__name__}.{name}"

        @functools.wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.calls.append(signature)
            logger.info("[trace] %s", signature)
            try:
                result: Any = method(*args, **kwargs)
            except Exception as e:
                logger.info("[trace] %s failed: %r", signature, e)
                raise
            logger.info("[trace] %s done", signature)
            return result

        return wrapper
