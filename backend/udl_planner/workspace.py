"""Per-browser application state and the actions the UI triggers on it."""
from __future__ import annotations
import logging
import uuid
from typing import Any, Dict, List, Optional, Set

from pydantic.alias_generators import to_camel

from . import generation
from .editing import apply_patch, move_item
from .errors import GenerationError, MissingPrerequisiteError, PlanBusyError
from .gemini_client import GeminiClient
from .schemas import SIBLING_FIELDS, GeneratedLessonPlan, LessonPlanInputs
from .settings import settings
from .storage import KeyValueStorage
from .store import PlanStore

logger = logging.getLogger(__name__)

# Changing any of these invalidates topic / standard suggestions
_CONTEXT_FIELDS = ("gradeLevel", "semester", "subject", "unitName")

PROCESS_EVALUATION_REQUIRES_UDL = "과정중심평가지를 생성하려면 먼저 UDL 평가 계획을 생성해야 합니다."
REVISION_IN_PROGRESS = "지도안을 수정하는 중입니다. 잠시 후 다시 시도해 주세요."


class Workspace:
	def __init__(self, workspace_id: str, storage: KeyValueStorage) -> None:
		self.workspace_id = workspace_id
		self.inputs = LessonPlanInputs()
		self.store = PlanStore(storage, f"{settings.storage_key}:{workspace_id}")
		self.store.load()
		self.is_editing = False
		self.draft: Optional[Dict[str, Any]] = None
		self.error: Optional[str] = None
		self.loading: Set[str] = set()
		self.cancelled = False
		self.plan_serial = 0

		self.topic_suggestions: List[str] = []
		self.topic_error: Optional[str] = None
		self.standard_suggestions: List[str] = []
		self.standard_error: Optional[str] = None
		self.objective_suggestions: List[str] = []
		self.objective_error: Optional[str] = None

	@property
	def current(self) -> Optional[GeneratedLessonPlan]:
		return self.store.current

	# --- form ---

	def update_input(self, name: str, value: str) -> None:
		data = self.inputs.to_json_dict()
		if name not in LessonPlanInputs.model_json_schema(by_alias=True)["properties"]:
			raise KeyError(name)
		data[name] = value
		self.inputs = LessonPlanInputs.model_validate(data)
		if name in _CONTEXT_FIELDS:
			self.topic_suggestions = []
			self.topic_error = None
			self.standard_suggestions = []
			self.standard_error = None
			self.objective_error = None
		elif name == "topic":
			self.objective_error = None

	def toggle_standard(self, standard: str) -> None:
		current = self.inputs.standards_list()
		if standard in current:
			updated = [s for s in current if s != standard]
		else:
			updated = current + [standard]
		self.inputs = self.inputs.model_copy(update={"achievement_standards": "\n".join(updated)})

	def select_objective(self, option: str) -> None:
		self.inputs = self.inputs.model_copy(update={"objectives": option})
		self.objective_suggestions = []

	def sibling_inputs(self) -> LessonPlanInputs:
		plan = self.current
		if plan is None:
			return self.inputs
		return self.inputs.model_copy(update={
			"grade_level": plan.grade_level,
			"subject": plan.subject,
			"topic": plan.lesson_title,
			"objectives": plan.detailed_objectives.overall or self.inputs.objectives,
			"achievement_standards": plan.achievement_standard or self.inputs.achievement_standards,
		})

	# --- suggestions ---

	async def suggest_topics(self, client: GeminiClient) -> List[str]:
		self.topic_error = None
		self.topic_suggestions = []
		self.loading.add("topics")
		try:
			self.topic_suggestions = await generation.generate_lesson_topics(
				client, self.inputs.grade_level, self.inputs.semester, self.inputs.subject, self.inputs.unit_name
			)
		except GenerationError as err:
			self.topic_error = err.message
			raise
		finally:
			self.loading.discard("topics")
		return self.topic_suggestions

	async def suggest_standards(self, client: GeminiClient) -> List[str]:
		self.standard_error = None
		self.standard_suggestions = []
		self.loading.add("standards")
		try:
			self.standard_suggestions = await generation.generate_achievement_standards(
				client, self.inputs.grade_level, self.inputs.semester, self.inputs.subject, self.inputs.unit_name
			)
		except GenerationError as err:
			self.standard_error = err.message
			raise
		finally:
			self.loading.discard("standards")
		return self.standard_suggestions

	async def suggest_objective(self, client: GeminiClient) -> str:
		self.objective_error = None
		self.loading.add("objective")
		try:
			objective = await generation.generate_learning_objective(
				client, self.inputs.grade_level, self.inputs.subject, self.inputs.topic
			)
		except GenerationError as err:
			self.objective_error = err.message
			raise
		finally:
			self.loading.discard("objective")
		self.inputs = self.inputs.model_copy(update={"objectives": objective})
		return objective

	async def suggest_objective_options(self, client: GeminiClient, topic: Optional[str] = None) -> List[str]:
		if topic is not None:
			# Picking a suggested topic also replaces the form topic
			self.inputs = self.inputs.model_copy(update={"topic": topic})
			self.topic_suggestions = []
			self.topic_error = None
		self.objective_error = None
		self.loading.add("objective")
		try:
			self.objective_suggestions = await generation.generate_learning_objective_options(
				client,
				self.inputs.grade_level,
				self.inputs.semester,
				self.inputs.subject,
				self.inputs.topic,
				self.inputs.achievement_standards,
			)
		except GenerationError as err:
			self.objective_error = err.message
			raise
		finally:
			self.loading.discard("objective")
		return self.objective_suggestions

	# --- main plan ---

	def begin_generation(self) -> None:
		self.loading.add("plan")
		self.error = None
		self.store.set_current(None)
		self._end_edit()
		self._switch_plan()
		self.cancelled = False

	def _switch_plan(self) -> int:
		# Results of requests started for an earlier plan must not land on the new one
		self.plan_serial += 1
		return self.plan_serial

	async def generate_plan(self, client: GeminiClient) -> Optional[GeneratedLessonPlan]:
		"""Generate a new UDL plan; returns None when cancelled or superseded meanwhile."""
		self.begin_generation()
		serial = self.plan_serial
		try:
			plan = await generation.generate_udl_lesson_plan(client, self.inputs)
		except GenerationError as err:
			if self.cancelled or serial != self.plan_serial:
				return None
			self.error = err.message
			raise
		finally:
			if not self.cancelled and serial == self.plan_serial:
				self.loading.discard("plan")
		if self.cancelled:
			logger.info("Workspace %s discarded a plan generated after cancellation", self.workspace_id)
			return None
		if serial != self.plan_serial:
			logger.info("Workspace %s discarded a plan generated after another plan was opened", self.workspace_id)
			return None
		self.store.set_current(plan)
		return plan

	async def revise_plan(self, client: GeminiClient, feedback: str) -> Optional[GeneratedLessonPlan]:
		if self.current is None or self.is_editing:
			return None
		serial = self.plan_serial
		self.loading.add("revision")
		self.error = None
		self.cancelled = False
		try:
			revised = await generation.revise_udl_lesson_plan(client, self.current, feedback)
		except GenerationError as err:
			if self.cancelled or serial != self.plan_serial:
				return None
			self.error = err.message
			raise
		finally:
			if not self.cancelled and serial == self.plan_serial:
				self.loading.discard("revision")
		if self.cancelled:
			return None
		if serial != self.plan_serial or self.current is None:
			logger.info("Workspace %s dropped a revision of a plan no longer active", self.workspace_id)
			return None
		# Siblings attached while the revision was pending stay with the plan
		current = self.current
		revised = revised.model_copy(update={f: getattr(current, f) for f in SIBLING_FIELDS.values()})
		return self.store.replace_with_revision(revised)

	def cancel(self) -> None:
		self.cancelled = True
		self.loading.discard("plan")
		self.loading.discard("revision")

	async def generate_sibling(self, client: GeminiClient, kind: str) -> Optional[GeneratedLessonPlan]:
		"""Generate one sibling document; a no-op when it exists, is in flight or the plan is being edited."""
		field = SIBLING_FIELDS[kind]
		plan = self.current
		if plan is None or self.is_editing or kind in self.loading or getattr(plan, field) is not None:
			return None
		if kind == "process-evaluation" and plan.udl_evaluation is None:
			self.error = PROCESS_EVALUATION_REQUIRES_UDL
			raise MissingPrerequisiteError(PROCESS_EVALUATION_REQUIRES_UDL)

		serial = self.plan_serial
		inputs = self.sibling_inputs()
		self.loading.add(kind)
		self.error = None
		try:
			if kind == "table":
				document = await generation.generate_table_lesson_plan(client, inputs)
			elif kind == "worksheet":
				document = await generation.generate_worksheet(client, inputs)
			elif kind == "udl-evaluation":
				document = await generation.generate_udl_evaluation_plan(client, inputs)
			else:
				document = await generation.generate_process_evaluation_worksheet(client, inputs, plan.udl_evaluation)
		except GenerationError as err:
			self.error = err.message
			raise
		finally:
			self.loading.discard(kind)
		if self.current is None or serial != self.plan_serial:
			logger.info("Workspace %s dropped a %s generated for a plan no longer active", self.workspace_id, kind)
			return None
		updated = self.store.attach(field, document)
		if self.is_editing and self.draft is not None:
			# Edit mode began while waiting; keep the draft in step
			self.draft = {**self.draft, to_camel(field): getattr(updated, field).to_json_dict()}
		return updated

	def set_activity_image(self, path: str, data_url: str) -> GeneratedLessonPlan:
		if self.current is None:
			raise LookupError("no active plan")
		if not (path.startswith("worksheet.levels.") and path.endswith(".imageUrl")):
			raise KeyError(path)
		updated = GeneratedLessonPlan.model_validate(apply_patch(self.current.to_json_dict(), path, data_url))
		self.store.update(updated)
		return updated

	# --- saved plans ---

	def save(self) -> Optional[GeneratedLessonPlan]:
		return self.store.save_current()

	def select(self, plan_id: str) -> Optional[GeneratedLessonPlan]:
		plan = self.store.select(plan_id)
		if plan is not None:
			self._switch_plan()
			self.error = None
			self.loading.discard("plan")
			self.loading.discard("revision")
			self._end_edit()
		return plan

	def delete(self, plan_id: str) -> None:
		if self.store.delete(plan_id):
			self._switch_plan()
			self._end_edit()

	# --- edit mode ---

	def begin_edit(self) -> Dict[str, Any]:
		if self.current is None:
			raise LookupError("no active plan")
		if "revision" in self.loading:
			raise PlanBusyError(REVISION_IN_PROGRESS)
		self.draft = self.current.to_json_dict()
		self.is_editing = True
		return self.draft

	def edit_field(self, path: str, value: Any) -> Dict[str, Any]:
		if not self.is_editing or self.draft is None:
			raise LookupError("not in edit mode")
		patched = apply_patch(self.draft, path, value)
		# Reject patches that break the document shape
		GeneratedLessonPlan.model_validate(patched)
		self.draft = patched
		return self.draft

	def move_step(self, index: int, direction: str) -> Dict[str, Any]:
		if not self.is_editing or self.draft is None:
			raise LookupError("not in edit mode")
		table = self.draft.get("tablePlan")
		if not table:
			raise KeyError("tablePlan")
		self.draft = apply_patch(self.draft, "tablePlan.steps", move_item(table.get("steps", []), index, direction))
		return self.draft

	def save_edits(self) -> GeneratedLessonPlan:
		if not self.is_editing or self.draft is None:
			raise LookupError("not in edit mode")
		updated = GeneratedLessonPlan.model_validate(self.draft)
		self.store.update(updated)
		self._end_edit()
		return updated

	def cancel_edit(self) -> None:
		self._end_edit()

	def _end_edit(self) -> None:
		self.is_editing = False
		self.draft = None

	def view_plan(self) -> Optional[GeneratedLessonPlan]:
		"""The plan as the display panel shows it: the draft while editing."""
		if self.is_editing and self.draft is not None:
			return GeneratedLessonPlan.model_validate(self.draft)
		return self.current


_workspaces: Dict[str, Workspace] = {}
_storage: Optional[KeyValueStorage] = None


def get_storage() -> KeyValueStorage:
	global _storage
	if _storage is None:
		_storage = KeyValueStorage()
	return _storage


def set_storage(storage: Optional[KeyValueStorage]) -> None:
	global _storage
	_storage = storage
	_workspaces.clear()


def new_workspace_id() -> str:
	return uuid.uuid4().hex


def workspace_for(workspace_id: str) -> Workspace:
	workspace = _workspaces.get(workspace_id)
	if workspace is None:
		workspace = Workspace(workspace_id, get_storage())
		_workspaces[workspace_id] = workspace
	return workspace
