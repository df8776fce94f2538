"""Ant 스타일 경로 패턴 매처.

Ant-style path pattern matching used by the access rules.

Syntax:
    ?    한 글자 (one character, not "/")
    *    한 세그먼트 안의 0개 이상 글자 (zero or more characters within a segment)
    **   0개 이상 세그먼트 (zero or more path segments)

"/css/**" matches "/css", "/css/" and "/css/a/b.css"; "/" matches only the root.
"""

import re
from functools import lru_cache


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Ant 패턴을 정규식으로 변환합니다 (Compile an ant pattern to a regex)."""
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("/**", i):
            # 선행 슬래시 포함 — "/**" also matches the bare prefix
            parts.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


def match(pattern: str, path: str) -> bool:
    """경로가 패턴과 완전히 일치하는지 확인합니다 (Whole-path match)."""
    return compile_pattern(pattern).fullmatch(path) is not None
