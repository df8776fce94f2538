"""주문 예제 패키지 — 인터페이스 기반 위임 체인과 추적 데코레이터.

Order example package — Interface-based delegation chain (controller →
service → repository) and the trace decorators that log each call.
"""
