from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, SmallInteger, String

from staff_portal.core.db import Base


class Staff(Base):
    __tablename__ = "staff"

    staff_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(45), nullable=True)
    last_name = Column(String(45), nullable=True)
    email = Column(String(50), nullable=True)
    username = Column(String(16), nullable=True)
    password = Column(String(40), nullable=True)
    store_id = Column(SmallInteger, nullable=False)
    address_id = Column(SmallInteger, nullable=False)
    last_update = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
