from __future__ import annotations
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from .db import SessionLocal
from .models import StorageEntry


class KeyValueStorage:
	"""String values under string keys, the server-side stand-in for browser localStorage."""

	def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
		self._session_factory = session_factory

	def get(self, key: str) -> Optional[str]:
		db = self._session_factory()
		try:
			row = db.get(StorageEntry, key)
			return row.value if row else None
		finally:
			db.close()

	def set(self, key: str, value: str) -> None:
		db = self._session_factory()
		try:
			row = db.get(StorageEntry, key)
			if row is None:
				row = StorageEntry(key=key, value=value)
			else:
				row.value = value
				row.updated_at = datetime.utcnow()
			db.add(row)
			db.commit()
		except Exception:
			db.rollback()
			raise
		finally:
			db.close()
