from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text
from .db import Base


class StorageEntry(Base):
	__tablename__ = "storage_entries"
	# One row per storage key; value is the serialized payload (JSON text)
	key = Column(String(256), primary_key=True, index=True)
	value = Column(Text, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
