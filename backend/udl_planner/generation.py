"""Prompt + schema per document type, one Gemini call each.

Every failure (transport, JSON, shape) surfaces as a ``GenerationError``
carrying the Korean message for that document type.
"""
from __future__ import annotations
import json
import logging
import re
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, Field, ValidationError

from . import prompts
from .curriculum import standards_for
from .errors import GenerationError
from .gemini_client import GeminiClient
from .schema_export import model_to_gemini_schema
from .schemas import (
	GeneratedLessonPlan,
	LessonPlanInputs,
	MultimediaResource,
	ProcessEvaluationWorksheet,
	TableLessonPlan,
	UdlEvaluationPlan,
	Worksheet,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Root-plan keys that the UDL generation does not produce itself
_PLAN_SCHEMA_EXCLUDE = (
	"id",
	"achievementStandard",
	"tablePlan",
	"worksheet",
	"udlEvaluation",
	"processEvaluationWorksheet",
)


class StandardsResponse(BaseModel):
	standards: List[str] = Field(default_factory=list)


class TopicsResponse(BaseModel):
	topics: List[str] = Field(default_factory=list)


class ObjectiveResponse(BaseModel):
	objective: str


class ObjectiveOptionsResponse(BaseModel):
	objectives: List[str] = Field(default_factory=list)


def extract_json_object(text: str) -> Any:
	try:
		return json.loads(text)
	except Exception:
		pass
	code_block = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
	if code_block:
		try:
			return json.loads(code_block.group(1))
		except Exception:
			pass
	first = text.find("{")
	last = text.rfind("}")
	if first != -1 and last != -1 and last > first:
		try:
			return json.loads(text[first : last + 1])
		except Exception:
			pass
	raise ValueError("LLM did not return valid JSON.")


async def _request(client: GeminiClient, prompt: str, schema: Dict[str, Any], model: Type[T], failure: str) -> T:
	try:
		raw = await client.generate(prompt, response_schema=schema)
		data = extract_json_object(raw)
		return model.model_validate(data)
	except (ValueError, ValidationError) as err:
		logger.error("%s response could not be parsed: %s", model.__name__, err)
		raise GenerationError(failure) from err
	except Exception as err:
		logger.exception("%s generation failed", model.__name__)
		raise GenerationError(failure) from err


async def generate_udl_lesson_plan(client: GeminiClient, inputs: LessonPlanInputs) -> GeneratedLessonPlan:
	schema = model_to_gemini_schema(GeneratedLessonPlan, exclude=_PLAN_SCHEMA_EXCLUDE)
	plan = await _request(
		client,
		prompts.build_udl_plan_prompt(inputs, schema),
		schema,
		GeneratedLessonPlan,
		"AI로부터 UDL 지도안을 생성하는 데 실패했습니다.",
	)
	plan.id = None
	plan.achievement_standard = inputs.achievement_standards
	return plan


async def revise_udl_lesson_plan(client: GeminiClient, plan: GeneratedLessonPlan, feedback: str) -> GeneratedLessonPlan:
	schema = model_to_gemini_schema(GeneratedLessonPlan, exclude=_PLAN_SCHEMA_EXCLUDE)
	revised = await _request(
		client,
		prompts.build_revision_prompt(plan, feedback, schema),
		schema,
		GeneratedLessonPlan,
		"AI로부터 지도안 수정본을 받는 데 실패했습니다.",
	)
	# Siblings were generated from the previous version; keep them attached
	revised.achievement_standard = revised.achievement_standard or plan.achievement_standard
	revised.table_plan = plan.table_plan
	revised.worksheet = plan.worksheet
	revised.udl_evaluation = plan.udl_evaluation
	revised.process_evaluation_worksheet = plan.process_evaluation_worksheet
	return revised


async def generate_achievement_standards(
	client: GeminiClient, grade_level: str, semester: str, subject: str, unit_name: str
) -> List[str]:
	official = standards_for(subject, grade_level)
	if not official:
		return [f"'{subject}' 과목의 성취기준 데이터가 없습니다."]
	schema = model_to_gemini_schema(StandardsResponse)
	result = await _request(
		client,
		prompts.build_standards_prompt(unit_name, official, schema),
		schema,
		StandardsResponse,
		"AI로부터 성취기준을 추천받는 데 실패했습니다.",
	)
	# Only standards from the official list are accepted
	allowed = set(official)
	selected = [s.strip() for s in result.standards if s.strip() in allowed]
	if len(selected) != len(result.standards):
		logger.info("Dropped %d standards outside the official list", len(result.standards) - len(selected))
	return selected


async def generate_lesson_topics(
	client: GeminiClient, grade_level: str, semester: str, subject: str, unit_name: str
) -> List[str]:
	schema = model_to_gemini_schema(TopicsResponse)
	result = await _request(
		client,
		prompts.build_topics_prompt(grade_level, semester, subject, unit_name, schema),
		schema,
		TopicsResponse,
		"AI로부터 수업 주제를 생성하는 데 실패했습니다.",
	)
	return result.topics


async def generate_learning_objective(client: GeminiClient, grade_level: str, subject: str, topic: str) -> str:
	schema = model_to_gemini_schema(ObjectiveResponse)
	result = await _request(
		client,
		prompts.build_objective_prompt(grade_level, subject, topic, schema),
		schema,
		ObjectiveResponse,
		"AI로부터 학습 목표를 생성하는 데 실패했습니다.",
	)
	return result.objective


async def generate_learning_objective_options(
	client: GeminiClient,
	grade_level: str,
	semester: str,
	subject: str,
	topic: str,
	achievement_standards: str,
) -> List[str]:
	schema = model_to_gemini_schema(ObjectiveOptionsResponse)
	result = await _request(
		client,
		prompts.build_objective_options_prompt(grade_level, semester, subject, topic, achievement_standards, schema),
		schema,
		ObjectiveOptionsResponse,
		"AI로부터 학습 목표를 생성하는 데 실패했습니다.",
	)
	options = [o.strip() for o in result.objectives if o.strip()]
	if not options:
		raise GenerationError("AI가 추천 학습 목표를 반환하지 못했습니다.")
	return options


async def generate_table_lesson_plan(client: GeminiClient, inputs: LessonPlanInputs) -> TableLessonPlan:
	schema = model_to_gemini_schema(TableLessonPlan)
	return await _request(
		client,
		prompts.build_table_plan_prompt(inputs, schema),
		schema,
		TableLessonPlan,
		"표 형식 지도안을 생성하는 중 오류가 발생했습니다.",
	)


async def generate_worksheet(client: GeminiClient, inputs: LessonPlanInputs) -> Worksheet:
	schema = model_to_gemini_schema(Worksheet)
	return await _request(
		client,
		prompts.build_worksheet_prompt(inputs, schema),
		schema,
		Worksheet,
		"활동지를 생성하는 중 오류가 발생했습니다.",
	)


async def generate_udl_evaluation_plan(client: GeminiClient, inputs: LessonPlanInputs) -> UdlEvaluationPlan:
	schema = model_to_gemini_schema(UdlEvaluationPlan)
	return await _request(
		client,
		prompts.build_udl_evaluation_prompt(inputs, schema),
		schema,
		UdlEvaluationPlan,
		"UDL 평가 계획을 생성하는 중 오류가 발생했습니다.",
	)


async def generate_process_evaluation_worksheet(
	client: GeminiClient, inputs: LessonPlanInputs, udl_evaluation: Optional[UdlEvaluationPlan] = None
) -> ProcessEvaluationWorksheet:
	schema = model_to_gemini_schema(ProcessEvaluationWorksheet)
	return await _request(
		client,
		prompts.build_process_evaluation_prompt(inputs, udl_evaluation, schema),
		schema,
		ProcessEvaluationWorksheet,
		"과정중심평가지를 생성하는 중 오류가 발생했습니다.",
	)


def search_url(resource: MultimediaResource) -> str:
	query = quote(resource.search_query, safe="")
	platform = resource.platform.lower()
	if "youtube" in platform:
		return f"https://www.youtube.com/results?search_query={query}"
	if "image" in platform:
		return f"https://www.google.com/search?tbm=isch&q={query}"
	return f"https://www.google.com/search?q={query}"
