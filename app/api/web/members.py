"""회원 화면 — 회원 가입 폼과 회원 목록.

Member pages — Signup form and member list.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.web.layout import error_message, esc, render
from app.database import get_db, transaction
from app.models.address import Address
from app.models.member import Member
from app.services.member_service import member_service
from app.utils.exceptions import DuplicateError

router: APIRouter = APIRouter()


def _member_form(
    message: str | None = None,
    name: str = "",
    city: str = "",
    street: str = "",
    zipcode: str = "",
) -> str:
    return f"""<h2>회원 가입</h2>
{error_message(message)}
<form method="post" action="/members/new">
<label>이름</label>
<input name="name" value="{esc(name)}" placeholder="이름을 입력하세요">
<label>도시</label>
<input name="city" value="{esc(city)}" placeholder="도시를 입력하세요">
<label>거리</label>
<input name="street" value="{esc(street)}" placeholder="거리를 입력하세요">
<label>우편번호</label>
<input name="zipcode" value="{esc(zipcode)}" placeholder="우편번호를 입력하세요">
<button type="submit">Submit</button>
</form>"""


@router.get("/members/new", response_class=HTMLResponse)
async def create_form() -> HTMLResponse:
    """회원 가입 폼을 반환합니다."""
    return render("회원 가입", _member_form())


@router.post("/members/new", response_model=None)
async def create(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: str = Form(""),
    city: str = Form(""),
    street: str = Form(""),
    zipcode: str = Form(""),
) -> HTMLResponse | RedirectResponse:
    """회원을 가입시키고 홈으로 이동합니다. 이름이 비었거나 중복이면 폼을 다시 보여줍니다.

    Sign up a member and redirect home. An empty or duplicate name
    re-renders the form with the submitted values.
    """
    name = name.strip()
    if not name:
        return render(
            "회원 가입",
            _member_form("회원 이름은 필수 입니다", name, city, street, zipcode),
            status_code=400,
        )

    member = Member(
        name=name,
        address=Address(city=city or None, street=street or None, zipcode=zipcode or None),
    )
    try:
        async with transaction(db):
            await member_service.join(db, member)
    except DuplicateError as exc:
        return render(
            "회원 가입",
            _member_form(exc.detail, name, city, street, zipcode),
            status_code=exc.status_code,
        )
    return RedirectResponse("/", status_code=303)


@router.get("/members", response_class=HTMLResponse)
async def member_list(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HTMLResponse:
    """회원 목록을 반환합니다."""
    members: list[Member] = await member_service.find_members(db)
    rows: str = "".join(
        f"<tr><td>{esc(m.id)}</td><td>{esc(m.name)}</td>"
        f"<td>{esc(m.address.city if m.address else None)}</td>"
        f"<td>{esc(m.address.street if m.address else None)}</td>"
        f"<td>{esc(m.address.zipcode if m.address else None)}</td></tr>"
        for m in members
    )
    body: str = f"""<h2>회원 목록</h2>
<table>
<thead><tr><th>#</th><th>이름</th><th>도시</th><th>주소</th><th>우편번호</th></tr></thead>
<tbody>{rows}</tbody>
</table>"""
    return render("회원 목록", body)
