"""Current plan plus the persisted list of saved plans.

The saved list is mirrored to a single storage key; every mutation rewrites
the whole serialized list.
"""
from __future__ import annotations
import json
import logging
import time
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from .schemas import GeneratedLessonPlan
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


def _now_ms() -> int:
	return int(time.time() * 1000)


class PlanStore:
	def __init__(self, storage: KeyValueStorage, key: str, *, clock: Callable[[], int] = _now_ms) -> None:
		self.storage = storage
		self.key = key
		self.clock = clock
		self.current: Optional[GeneratedLessonPlan] = None
		self.saved: List[GeneratedLessonPlan] = []

	def load(self) -> None:
		try:
			raw = self.storage.get(self.key)
			if raw:
				items: List[Any] = json.loads(raw)
				self.saved = [GeneratedLessonPlan.model_validate(item) for item in items]
		except (ValueError, ValidationError, TypeError) as err:
			logger.error("Failed to load saved plans from storage key %s: %s", self.key, err)
		except Exception:
			logger.exception("Failed to load saved plans from storage key %s", self.key)

	def _persist(self) -> None:
		try:
			self.storage.set(self.key, json.dumps([p.to_json_dict() for p in self.saved], ensure_ascii=False))
		except Exception:
			logger.exception("Failed to save plans to storage key %s", self.key)

	def _set_saved(self, plans: List[GeneratedLessonPlan]) -> None:
		self.saved = plans
		self._persist()

	def find(self, plan_id: str) -> Optional[GeneratedLessonPlan]:
		return next((p for p in self.saved if p.id == plan_id), None)

	def set_current(self, plan: Optional[GeneratedLessonPlan]) -> None:
		self.current = plan

	def save_current(self) -> Optional[GeneratedLessonPlan]:
		if self.current is None or self.current.id:
			return None
		saved = self.current.model_copy(deep=True, update={"id": f"{self.current.lesson_title}-{self.clock()}"})
		self._set_saved([saved] + self.saved)
		self.current = saved
		return saved

	def delete(self, plan_id: str) -> bool:
		"""Remove a saved plan; returns True when it was the active plan."""
		self._set_saved([p for p in self.saved if p.id != plan_id])
		if self.current is not None and self.current.id == plan_id:
			self.current = None
			return True
		return False

	def select(self, plan_id: str) -> Optional[GeneratedLessonPlan]:
		plan = self.find(plan_id)
		if plan is not None:
			self.current = plan.model_copy(deep=True)
		return plan

	def update(self, plan: GeneratedLessonPlan) -> None:
		self.current = plan
		if plan.id:
			self._set_saved([plan.model_copy(deep=True) if p.id == plan.id else p for p in self.saved])

	def attach(self, field: str, document: Any) -> GeneratedLessonPlan:
		if self.current is None:
			raise LookupError("no active plan")
		updated = self.current.model_copy(update={field: document})
		self.update(updated)
		return updated

	def replace_with_revision(self, revised: GeneratedLessonPlan) -> GeneratedLessonPlan:
		plan_id = self.current.id if self.current is not None else None
		updated = revised.model_copy(update={"id": plan_id})
		self.current = updated
		return updated
