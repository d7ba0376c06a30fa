from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staff_portal.core.errors import StoreError
from staff_portal.models.staff import Staff
from staff_portal.schemas.staff import StaffCreate
from staff_portal.services.pagination import PAGE_SIZE

logger = logging.getLogger(__name__)


def insert_staff(db: Session, payload: StaffCreate, *, store_id: int, address_id: int) -> int:
    """Insert one staff row and return the identity the store generated for it."""
    staff = Staff(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        username=payload.username,
        password=payload.password,
        store_id=store_id,
        address_id=address_id,
    )
    try:
        db.add(staff)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("store_error", extra={"operation": "insert_staff"})
        raise StoreError("Staff member could not be created") from exc

    logger.info("staff_created", extra={"staff_id": staff.staff_id})
    return staff.staff_id


def fetch_one(db: Session, staff_id: int) -> Staff | None:
    logger.info("staff_lookup", extra={"staff_id": staff_id})
    try:
        return db.query(Staff).filter(Staff.staff_id == staff_id).first()
    except SQLAlchemyError as exc:
        logger.exception("store_error", extra={"operation": "fetch_one"})
        raise StoreError("Staff member could not be loaded") from exc


def fetch_page(db: Session, offset: int) -> list[Staff]:
    logger.info("staff_page", extra={"offset": offset})
    try:
        return (
            db.query(Staff)
            .order_by(Staff.last_update.desc())
            .limit(PAGE_SIZE)
            .offset(offset)
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("store_error", extra={"operation": "fetch_page"})
        raise StoreError("Staff listing could not be loaded") from exc
