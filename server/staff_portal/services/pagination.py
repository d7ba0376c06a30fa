from __future__ import annotations

import re

from staff_portal.schemas.staff import Pagination

PAGE_SIZE = 10
MAX_PAGE = 2**31 - 1

_PAGE_PATTERN = re.compile(r"\+?[0-9]+")


def resolve_page(raw: str | None) -> int:
    """Turn the ``page`` query value into a page number.

    Absent, negative (anything starting with ``-``) and unparsable values all
    fall back to the first page. Values beyond a signed 32-bit integer count as
    unparsable.
    """
    if raw is None or raw.startswith("-"):
        return 0
    if not _PAGE_PATTERN.fullmatch(raw):
        return 0
    page = int(raw)
    if page > MAX_PAGE:
        return 0
    return page


def compute_offset(page: int) -> int:
    return page * PAGE_SIZE


def build_pagination(page: int) -> Pagination:
    # prev is not clamped; a negative value means there is no previous page.
    return Pagination(page=page, next=page + 1, prev=page - 1)
