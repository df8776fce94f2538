"""보안 패키지 — 경로 기반 접근 제어.

Security package — Ant-style path matching and the ordered access rules
evaluated for every request by SecurityMiddleware.
"""
