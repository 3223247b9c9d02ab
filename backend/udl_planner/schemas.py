"""Document shapes exchanged with the AI and persisted in saved plans.

Field names follow the camelCase keys of the AI responses; the Python side
uses snake_case attributes. Documents are only validated by shape, unknown
keys are preserved.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Document(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

	def to_json_dict(self) -> Dict[str, Any]:
		return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class LessonPlanInputs(Document):
	grade_level: str = "초등학교 (3-4학년)"
	semester: str = "1학기"
	subject: str = "과학"
	topic: str = "물의 순환"
	duration: str = "40분"
	objectives: str = "학생들은 물의 순환의 세 가지 주요 단계인 증발, 응결, 강수를 설명할 수 있다."
	unit_name: str = "3. 액체와 기체"
	achievement_standards: str = "[4과04-02]물이 증발하고 끓을 때의 변화를 관찰하고, 물의 상태 변화가 우리 생활에 이용되는 예를 찾을 수 있다."
	special_needs: Optional[str] = ""
	student_characteristics: Optional[str] = ""

	def standards_list(self) -> List[str]:
		return [s for s in self.achievement_standards.split("\n") if s.strip() != ""]


# --- UDL lesson plan ---

class DetailedObjectives(Document):
	overall: str = ""
	some: str = ""
	few: str = ""


class UDLStrategy(Document):
	guideline: str = ""
	strategy: str = ""
	example: str = ""


class UDLPrincipleSection(Document):
	principle: str = ""
	description: str = ""
	strategies: List[UDLStrategy] = Field(default_factory=list)


class AssessmentSection(Document):
	title: str = ""
	methods: List[str] = Field(default_factory=list)


class MultimediaResource(Document):
	# The AI emits these keys in snake_case
	model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="allow")

	title: str = ""
	platform: str = ""
	search_query: str = ""


# --- Table lesson plan ---

class TablePlanMetadata(Document):
	lesson_title: str = ""
	subject: str = ""
	grade_level: str = ""
	topic: str = ""
	objectives: str = ""
	duration: str = ""
	materials: List[str] = Field(default_factory=list)


class LessonPlanTableRow(Document):
	phase: str = ""
	duration: str = ""
	process: str = ""
	teacher_activities: List[str] = Field(default_factory=list)
	student_activities: List[str] = Field(default_factory=list)
	materials_and_notes: List[str] = Field(default_factory=list)


class EvaluationCriterion(Document):
	content: str = ""
	method: str = ""
	excellent: str = ""
	good: str = ""
	needs_improvement: str = ""


class EvaluationPlan(Document):
	criteria: List[EvaluationCriterion] = Field(default_factory=list)


class TableLessonPlan(Document):
	metadata: TablePlanMetadata = Field(default_factory=TablePlanMetadata)
	steps: List[LessonPlanTableRow] = Field(default_factory=list)
	evaluation_plan: EvaluationPlan = Field(default_factory=EvaluationPlan)


# --- Worksheet ---

class WorksheetActivity(Document):
	title: str = ""
	description: str = ""
	content: str = ""
	image_prompt: Optional[str] = None
	image_url: Optional[str] = None


class WorksheetLevel(Document):
	level_name: str = ""
	title: str = ""
	activities: List[WorksheetActivity] = Field(default_factory=list)


class Worksheet(Document):
	title: str = ""
	description: str = ""
	levels: List[WorksheetLevel] = Field(default_factory=list)


# --- UDL evaluation plan ---

class EvaluationTaskLevel(Document):
	description: str = ""
	criteria: str = ""


class EvaluationTaskLevels(Document):
	advanced: EvaluationTaskLevel = Field(default_factory=EvaluationTaskLevel)
	proficient: EvaluationTaskLevel = Field(default_factory=EvaluationTaskLevel)
	basic: EvaluationTaskLevel = Field(default_factory=EvaluationTaskLevel)


class EvaluationTask(Document):
	task_title: str = ""
	task_description: str = ""
	udl_connections: List[str] = Field(default_factory=list)
	levels: EvaluationTaskLevels = Field(default_factory=EvaluationTaskLevels)


class AchievementStandardLevels(Document):
	# Level keys are single upper-case letters, kept as-is
	model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="allow")

	A: str = ""
	B: str = ""
	C: str = ""


class UdlEvaluationPlan(Document):
	title: str = ""
	description: str = ""
	unit_lesson: Optional[str] = None
	evaluation_timing: Optional[str] = None
	evaluation_types: List[str] = Field(default_factory=list)
	evaluation_intent_and_notices: Optional[str] = None
	achievement_standard_levels: Optional[AchievementStandardLevels] = None
	example_answers: Optional[str] = None
	tasks: List[EvaluationTask] = Field(default_factory=list)


# --- Process evaluation worksheet ---

class StudentInfo(Document):
	grade: str = ""
	class_: str = Field(default="", alias="class")
	number: str = ""
	name: str = ""


class EvaluationItemLevels(Document):
	excellent: str = ""
	good: str = ""
	needs_improvement: str = ""


class EvaluationItem(Document):
	criterion: str = ""
	levels: EvaluationItemLevels = Field(default_factory=EvaluationItemLevels)


class OverallFeedback(Document):
	teacher_comment: str = ""
	student_reflection: str = ""


class ProcessEvaluationWorksheet(Document):
	title: str = ""
	student_info: StudentInfo = Field(default_factory=StudentInfo)
	overall_description: str = ""
	evaluation_items: List[EvaluationItem] = Field(default_factory=list)
	overall_feedback: OverallFeedback = Field(default_factory=OverallFeedback)


# --- Root document ---

class GeneratedLessonPlan(Document):
	id: Optional[str] = None
	lesson_title: str = ""
	subject: str = ""
	grade_level: str = ""
	detailed_objectives: DetailedObjectives = Field(default_factory=DetailedObjectives)
	udl_principles: List[UDLPrincipleSection] = Field(default_factory=list)
	assessment: AssessmentSection = Field(default_factory=AssessmentSection)
	context_analysis: str = ""
	learner_analysis: str = ""
	achievement_standard: Optional[str] = None
	multimedia_resources: Optional[List[MultimediaResource]] = Field(default=None, alias="multimedia_resources")

	table_plan: Optional[TableLessonPlan] = None
	worksheet: Optional[Worksheet] = None
	udl_evaluation: Optional[UdlEvaluationPlan] = None
	process_evaluation_worksheet: Optional[ProcessEvaluationWorksheet] = None


# Sibling documents attached to a plan after separate generation calls
SIBLING_FIELDS: Dict[str, str] = {
	"table": "table_plan",
	"worksheet": "worksheet",
	"udl-evaluation": "udl_evaluation",
	"process-evaluation": "process_evaluation_worksheet",
}
