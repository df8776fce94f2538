"""내부 호출(self-invocation) 예제.

Self-invocation example. Interception that lives in a wrapper only sees
calls that go through the wrapper. ``SelfCallService.external()`` calls
``self.internal()`` on the concrete instance, so a wrapper around the
service traces ``external`` but never ``internal``.

The fix is structural: move ``internal()`` to its own ``InternalService``
and hand ``CallService`` the *wrapped* instance. Every call then crosses
the wrapper boundary.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Internal(Protocol):
    def internal(self) -> None: ...


class InternalService:
    def internal(self) -> None:
        logger.info("call internal")


class CallService:
    """외부 메서드가 별도 협력 객체의 ``internal()``을 호출합니다.

    Attributes:
        internal_service: ``internal()``을 제공하는 협력 객체 (usually a wrapper)
    """

    def __init__(self, internal_service: Internal) -> None:
        self.internal_service: Internal = internal_service

    def external(self) -> None:
        logger.info("call external")
        self.internal_service.internal()


class SelfCallService:
    """주의: ``external()``의 내부 호출은 래퍼를 거치지 않습니다.

    Caveat: the ``self.internal()`` call inside ``external()`` bypasses any
    wrapper around this object.
    """

    def external(self) -> None:
        logger.info("call external")
        self.internal()

    def internal(self) -> None:
        logger.info("call internal")
