"""내부 호출 예제 패키지.

Self-invocation example package — a service split so that every call to
``internal()`` crosses a wrapper boundary, plus the generic TraceWrapper.
Example-only: nothing in the web application imports it; the behaviour is
demonstrated by its tests.
"""
