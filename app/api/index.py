"""게시판 HTML 페이지 — 목록, 등록, 수정 화면.

Board HTML pages — Post list, save form and update form.
Forms submit to the /api/v1/posts REST API with fetch().
"""

from html import escape
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_login_user
from app.config import settings
from app.database import get_db
from app.schemas.auth import SessionUser
from app.services.posts_service import posts_service

router: APIRouter = APIRouter()

LAYOUT_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{TITLE}}</title>
<style>
body{font-family:system-ui,sans-serif;max-width:880px;margin:40px auto;padding:0 16px;color:#222}
table{width:100%;border-collapse:collapse}
th,td{border-bottom:1px solid #ddd;padding:8px;text-align:left}
a.btn,button{display:inline-block;padding:8px 14px;border:none;border-radius:6px;background:#0d6efd;color:#fff;text-decoration:none;cursor:pointer;font-size:14px}
a.btn.secondary,button.danger{background:#6c757d}
label{display:block;font-size:13px;color:#555;margin:12px 0 4px}
input,textarea{width:100%;padding:8px;border:1px solid #ccc;border-radius:6px;box-sizing:border-box}
textarea{min-height:160px}
</style>
</head>
<body>
{{BODY}}
<script>
async function send(method, url, body) {
  const res = await fetch(url, {method: method, headers: {"Content-Type": "application/json"}, body: body ? JSON.stringify(body) : undefined});
  if (!res.ok) { alert("요청이 실패했습니다 (" + res.status + ")"); return; }
  window.location.href = "/";
}
</script>
</body>
</html>"""


def _render(title: str, body: str) -> HTMLResponse:
    return HTMLResponse(LAYOUT_HTML.replace("{{TITLE}}", escape(title)).replace("{{BODY}}", body))


def _user_bar(user: SessionUser | None) -> str:
    if user is None:
        return '<a class="btn" href="/login">Login</a>'
    return f'Logged in as: <b>{escape(user.name)}</b> ({user.role.display_name}) <a class="btn secondary" href="/logout">Logout</a>'


@router.get("/", response_class=HTMLResponse)
async def index(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[SessionUser | None, Depends(get_login_user)],
) -> HTMLResponse:
    """게시글 목록 페이지 (Post list page, newest first)."""
    rows: list[str] = []
    for p in await posts_service.find_all_desc(db):
        rows.append(
            f"<tr><td>{p.id}</td>"
            f'<td><a href="/posts/update/{p.id}">{escape(p.title)}</a></td>'
            f"<td>{escape(p.author or '')}</td>"
            f"<td>{p.modified_date:%Y-%m-%d %H:%M}</td></tr>"
        )
    body = (
        f"<h1>{escape(settings.APP_NAME)}</h1>"
        f"<p>{_user_bar(user)} <a class=\"btn\" href=\"/posts/save\">글 등록</a></p>"
        "<table><thead><tr><th>게시글번호</th><th>제목</th><th>작성자</th><th>최종수정일</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody></table>"
    )
    return _render(settings.APP_NAME, body)


@router.get("/posts/save", response_class=HTMLResponse)
async def posts_save(
    user: Annotated[SessionUser, Depends(get_current_user)],
) -> HTMLResponse:
    """게시글 등록 페이지 (Post save form, author prefilled with the login email)."""
    author: str = escape(user.email)
    body = (
        "<h1>게시글 등록</h1>"
        '<label for="title">제목</label><input id="title" placeholder="제목을 입력하세요">'
        f'<label for="author">작성자</label><input id="author" value="{author}">'
        '<label for="content">내용</label><textarea id="content" placeholder="내용을 입력하세요"></textarea>'
        '<p><a class="btn secondary" href="/">취소</a> '
        '<button onclick="send(\'POST\', \'/api/v1/posts\', {title: title.value, author: author.value, content: content.value})">등록</button></p>'
    )
    return _render("게시글 등록", body)


@router.get("/posts/update/{post_id}", response_class=HTMLResponse)
async def posts_update(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HTMLResponse:
    """게시글 수정 페이지 (Post update form).

    Raises:
        NotFoundError(404): 게시글이 없을 때
    """
    p = await posts_service.find_by_id(db, post_id)
    body = (
        "<h1>게시글 수정</h1>"
        f'<label for="id">글 번호</label><input id="id" value="{p.id}" readonly>'
        f'<label for="title">제목</label><input id="title" value="{escape(p.title)}">'
        f'<label for="author">작성자</label><input id="author" value="{escape(p.author or "")}" readonly>'
        f'<label for="content">내용</label><textarea id="content">{escape(p.content)}</textarea>'
        '<p><a class="btn secondary" href="/">취소</a> '
        f"<button onclick=\"send('PUT', '/api/v1/posts/{p.id}', {{title: title.value, content: content.value}})\">수정 완료</button> "
        f"<button class=\"danger\" onclick=\"send('DELETE', '/api/v1/posts/{p.id}')\">삭제</button></p>"
    )
    return _render("게시글 수정", body)
