"""경로 기반 접근 제어 정책.

Path-based access-control policy.

The policy is an ordered list of (path patterns, requirement) rules. The
first rule whose pattern matches the request path decides; more specific
rules therefore come first.

Default rules:
    1. "/", "/css/**", "/images/**", "/js/**", "/h2-console/**"  → 누구나 (permit all)
    2. 로그인 흐름 "/login", "/oauth2/**", "/login/oauth2/**", "/logout", "/health" → 누구나
       예제 엔드포인트 "/hello/**", "/v1/**" → 누구나
    3. "/api/v1/**"                                             → USER 역할 필요
    4. 나머지 모든 경로 "/**"                                    → 인증 필요

Decision:
    ALLOW    — 통과 (route normally)
    REDIRECT — 주체 없음 (no principal) → 로그인 페이지로 이동
    DENY     — 주체는 있으나 역할 부족 (principal lacks the role) → 403
"""

import enum
from typing import Sequence

from pydantic import BaseModel

from app.models.user import Role
from app.schemas.auth import SessionUser
from app.security.path_matcher import match


class AccessDecision(str, enum.Enum):
    """접근 결정 (Outcome of an authorization check)."""

    ALLOW = "allow"
    DENY = "deny"
    REDIRECT = "redirect"


class Requirement(str, enum.Enum):
    """규칙 요구 조건 (What a rule demands of the principal)."""

    PERMIT_ALL = "permit_all"
    AUTHENTICATED = "authenticated"
    HAS_ROLE = "has_role"


class AccessRule(BaseModel):
    """접근 규칙 — 경로 패턴 목록과 요구 조건.

    Attributes:
        patterns: Ant 스타일 경로 패턴 (Ant-style path patterns)
        requirement: 요구 조건 (Requirement applied on match)
        role: HAS_ROLE일 때 필요한 역할 (Role for HAS_ROLE rules)
    """

    model_config = {"frozen": True}

    patterns: tuple[str, ...]
    requirement: Requirement
    role: Role | None = None

    def matches(self, path: str) -> bool:
        return any(match(pattern, path) for pattern in self.patterns)

    def decide(self, principal: SessionUser | None) -> AccessDecision:
        if self.requirement == Requirement.PERMIT_ALL:
            return AccessDecision.ALLOW
        if principal is None:
            return AccessDecision.REDIRECT
        if self.requirement == Requirement.HAS_ROLE and not principal.has_role(self.role):
            return AccessDecision.DENY
        return AccessDecision.ALLOW


def permit_all(*patterns: str) -> AccessRule:
    return AccessRule(patterns=patterns, requirement=Requirement.PERMIT_ALL)


def authenticated(*patterns: str) -> AccessRule:
    return AccessRule(patterns=patterns, requirement=Requirement.AUTHENTICATED)


def has_role(role: Role, *patterns: str) -> AccessRule:
    return AccessRule(patterns=patterns, requirement=Requirement.HAS_ROLE, role=role)


# 로그인 성공/로그아웃 후 이동 경로, 미인증 시 이동할 로그인 페이지
LOGOUT_SUCCESS_URL: str = "/"
LOGIN_PAGE_URL: str = "/login"

DEFAULT_RULES: tuple[AccessRule, ...] = (
    permit_all("/", "/css/**", "/images/**", "/js/**", "/h2-console/**"),
    permit_all(LOGIN_PAGE_URL, "/oauth2/**", "/login/oauth2/**", "/logout"),
    permit_all("/health"),
    # 보안 설정 이전부터 공개된 예제 엔드포인트 (Standalone demo endpoints)
    permit_all("/hello/**", "/v1/**"),
    has_role(Role.USER, "/api/v1/**"),
    authenticated("/**"),
)


def authorize(
    path: str,
    principal: SessionUser | None,
    rules: Sequence[AccessRule] = DEFAULT_RULES,
) -> AccessDecision:
    """요청 경로와 주체에 대한 접근 결정을 반환합니다.

    Return the access decision for a request path and principal. The first
    matching rule decides; a path no rule matches requires authentication.

    Args:
        path: 요청 경로 (Request path, without query string)
        principal: 인증된 주체 또는 None (Authenticated principal or None)
        rules: 순서가 있는 규칙 목록 (Ordered rule list)

    Returns:
        AccessDecision: ALLOW, DENY 또는 REDIRECT
    """
    for rule in rules:
        if rule.matches(path):
            return rule.decide(principal)
    return AccessDecision.ALLOW if principal is not None else AccessDecision.REDIRECT
