from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class StaffCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    class Config:
        # staff_id and any other unknown key are dropped, the store assigns identities
        extra = "ignore"
        coerce_numbers_to_str = True


class StaffOut(BaseModel):
    staff_id: int
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    username: Optional[str]
    password: Optional[str]

    class Config:
        from_attributes = True


class Pagination(BaseModel):
    page: int
    next: int
    prev: int


class StaffViewModel(BaseModel):
    staff: list[StaffOut]
    pagination: Pagination
    showform: bool
