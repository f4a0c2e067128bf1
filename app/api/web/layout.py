"""서버 렌더링 페이지 공통 레이아웃 — HTML 골격과 렌더 헬퍼.

Shared layout for server-rendered pages — HTML skeleton and render helpers.
Pages build their body markup in-module and pass it to ``render``.
Every user-provided value must go through ``esc``.
"""

import html
from typing import Any

from fastapi.responses import HTMLResponse

PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{TITLE}}</title>
<style>
body{font-family:system-ui,sans-serif;background:#fafafa;color:#222;margin:0}
.wrap{max-width:880px;margin:0 auto;padding:24px}
header a{color:#222;text-decoration:none;font-weight:bold}
h2{margin:24px 0 16px}
label{display:block;font-size:13px;color:#555;margin-bottom:4px}
input,select{width:100%;padding:8px;border:1px solid #ccc;border-radius:6px;font-size:14px;box-sizing:border-box;margin-bottom:12px}
button,.btn{display:inline-block;padding:8px 14px;border:none;border-radius:6px;background:#3867d6;color:#fff;font-size:14px;cursor:pointer;text-decoration:none}
.btn-danger{background:#eb3b5a}
table{width:100%;border-collapse:collapse;background:#fff}
th,td{border-bottom:1px solid #eee;padding:8px;text-align:left;font-size:14px}
.inline input,.inline select{width:auto;display:inline-block;margin-right:8px}
.msg{padding:10px;border-radius:6px;font-size:13px;margin-bottom:16px}
.err{background:#eb3b5a22;color:#c0392b}
</style>
</head>
<body>
<div class="wrap">
<header><a href="/">HELLO SHOP</a></header>
{{BODY}}
</div>
</body>
</html>"""


def esc(value: Any) -> str:
    """HTML 이스케이프 — None은 빈 문자열 (Escape for HTML; None renders empty)."""
    if value is None:
        return ""
    return html.escape(str(value))


def error_message(message: str | None) -> str:
    """오류 메시지 블록을 만듭니다 (Error banner markup, empty when no message)."""
    if not message:
        return ""
    return f'<div class="msg err">{esc(message)}</div>'


def render(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    """레이아웃에 본문을 채워 HTML 응답을 만듭니다.

    Fill the layout with a title and body markup.

    Args:
        title: 페이지 제목 (Page title, escaped here)
        body: 본문 HTML (Body markup, already escaped by the caller)
        status_code: HTTP 상태 코드 (HTTP status code)
    """
    page: str = PAGE_HTML.replace("{{TITLE}}", esc(title)).replace("{{BODY}}", body)
    return HTMLResponse(page, status_code=status_code)
