from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from connectspace.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocalStorageEntry(Base):
    __tablename__ = "local_storage"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
