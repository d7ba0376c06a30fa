from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from staff_portal.core.db import get_db
from staff_portal.core.errors import PayloadInvalid, RecordNotFound
from staff_portal.schemas.staff import StaffCreate
from staff_portal.services import staff as staff_service
from staff_portal.services.pagination import build_pagination, compute_offset, resolve_page
from staff_portal.services.rendering import render_staff_page
from staff_portal.services.views import build_view_model

router = APIRouter(prefix="/staff", tags=["staff"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
MAX_STAFF_ID = 2**31 - 1


async def read_staff_payload(request: Request) -> StaffCreate:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        try:
            data = await request.json()
        except ValueError as exc:
            raise PayloadInvalid("Request body is not valid JSON") from exc
    elif content_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except (MultiPartException, StarletteHTTPException) as exc:
            raise PayloadInvalid("Request body is not a valid form") from exc
        data = {key: value for key, value in form.items() if isinstance(value, str)}
        if not data:
            raise PayloadInvalid("Request body is empty")
    else:
        raise PayloadInvalid("Can't create staff from input")

    if not isinstance(data, dict):
        raise PayloadInvalid("Request body must be an object")
    try:
        return StaffCreate.model_validate(data)
    except ValidationError as exc:
        raise PayloadInvalid("Can't create staff from input") from exc


def _parse_staff_id(raw: str) -> int:
    try:
        staff_id = int(raw.strip())
    except ValueError as exc:
        raise PayloadInvalid("staff_id must be an integer") from exc
    # staff_id is a signed 32-bit column
    if not -(2**31) <= staff_id <= MAX_STAFF_ID:
        raise PayloadInvalid("staff_id is out of range")
    return staff_id


@router.get("", response_class=HTMLResponse, status_code=status.HTTP_200_OK)
def get_staff(
    *,
    page: str | None = Query(None),
    new: str | None = Query(None),
    staff_id: str | None = Query(None),
    db: Session = Depends(get_db),
) -> HTMLResponse:
    page_number = resolve_page(page)

    if staff_id is not None:
        record = staff_service.fetch_one(db, _parse_staff_id(staff_id))
        if record is None:
            raise RecordNotFound(f"Staff member {staff_id} not found")
        records = [record]
    else:
        records = staff_service.fetch_page(db, compute_offset(page_number))

    view_model = build_view_model(records, build_pagination(page_number), new == "t")
    return HTMLResponse(render_staff_page(view_model), status_code=status.HTTP_200_OK)


@router.post("", status_code=status.HTTP_303_SEE_OTHER)
def create_staff(
    request: Request,
    payload: StaffCreate = Depends(read_staff_payload),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    settings = request.app.state.settings
    staff_service.insert_staff(
        db,
        payload,
        store_id=settings.DEFAULT_STORE_ID,
        address_id=settings.DEFAULT_ADDRESS_ID,
    )
    return RedirectResponse(url="/staff", status_code=status.HTTP_303_SEE_OTHER)
