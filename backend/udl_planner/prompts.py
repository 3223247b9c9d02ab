from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

from .schemas import GeneratedLessonPlan, LessonPlanInputs, UdlEvaluationPlan


def _schema_block(schema: Dict[str, Any]) -> str:
	return "Here is the JSON schema to follow:\n" + json.dumps(schema, ensure_ascii=False)


def _lesson_block(inputs: LessonPlanInputs) -> str:
	return (
		"**User's Lesson Information:**\n"
		f"- Grade Level: {inputs.grade_level} ({inputs.semester}), Subject: {inputs.subject}, "
		f"Unit Name: {inputs.unit_name}, Lesson Topic: {inputs.topic}\n"
		f"- Achievement Standard: {inputs.achievement_standards}, Lesson Duration: {inputs.duration}, "
		f"Core Learning Objective: {inputs.objectives}\n"
		f"- Students with Special Needs: {inputs.special_needs or 'Apply general UDL principles.'}\n"
		f"- Student Characteristics: {inputs.student_characteristics or 'Not specified.'}\n"
	)


def build_udl_plan_prompt(inputs: LessonPlanInputs, schema: Dict[str, Any]) -> str:
	return (
		"You are an expert in instructional design specializing in Universal Design for Learning (UDL) "
		"and the 2022 revised South Korean curriculum.\n"
		"Your task is to create a comprehensive lesson plan based on user input.\n\n"
		f"{_lesson_block(inputs)}\n"
		"**Generation Instructions:**\n"
		"1. Differentiated Objectives: Based on the 'Core Learning Objective', create objectives for all (overall), "
		"some (some), and a few (few) students. For the 'few' objective, MUST include two types of goals: "
		"1) A support-focused goal and 2) An enrichment goal. Use a bullet point (•) and a newline character (\\n) to separate them.\n"
		"2. Analysis: Write 2-3 sentences for 'contextAnalysis' and 'learnerAnalysis' based on the 2022 curriculum.\n"
		"3. UDL Principles: Provide 1-2 actionable strategies for each of the three UDL principles "
		"(engagement, representation, action and expression).\n"
		"4. Multimedia: Suggest 2-3 'multimedia_resources' with a platform (YouTube, Image, Web) and a search_query.\n"
		"5. Other: Create a creative 'lessonTitle'.\n"
		"6. Output Format: Respond strictly in JSON, written entirely in Korean.\n\n"
		f"{_schema_block(schema)}"
	)


def build_revision_prompt(plan: GeneratedLessonPlan, feedback: str, schema: Dict[str, Any]) -> str:
	current = plan.model_dump(
		by_alias=True,
		exclude_none=True,
		mode="json",
		exclude={"id", "table_plan", "worksheet", "udl_evaluation", "process_evaluation_worksheet"},
	)
	return (
		"You are an expert in Universal Design for Learning (UDL). Revise the lesson plan below according to "
		"the teacher's feedback. Keep every part the feedback does not mention unchanged.\n\n"
		f"[Current Lesson Plan]\n{json.dumps(current, ensure_ascii=False)}\n\n"
		f"[Teacher Feedback]\n{feedback}\n\n"
		"Respond strictly in JSON, written entirely in Korean, with the same structure.\n\n"
		f"{_schema_block(schema)}"
	)


def build_standards_prompt(unit_name: str, official: List[str], schema: Dict[str, Any]) -> str:
	official_list = "\n".join(official)
	return (
		f"From the [Official List] below, select the 2-4 most relevant standards for the unit '{unit_name}'.\n"
		"You MUST select only from the list and copy each entry exactly. Respond in JSON.\n"
		f"[Official List]\n{official_list}\n\n"
		f"{_schema_block(schema)}"
	)


def build_topics_prompt(grade_level: str, semester: str, subject: str, unit_name: str, schema: Dict[str, Any]) -> str:
	return (
		f"Recommend 5 interesting lesson topics for the unit '{unit_name}' in {subject} "
		f"for {grade_level} ({semester}). Respond in Korean within a JSON object with a \"topics\" array.\n\n"
		f"{_schema_block(schema)}"
	)


def build_objective_prompt(grade_level: str, subject: str, topic: str, schema: Dict[str, Any]) -> str:
	return (
		f"Create a single, core, observable learning objective for a lesson on '{topic}' for {grade_level} {subject}. "
		"Phrase it as \"학생들은 ~할 수 있다.\" Respond in Korean within a JSON object with an \"objective\" string.\n\n"
		f"{_schema_block(schema)}"
	)


def build_objective_options_prompt(
	grade_level: str,
	semester: str,
	subject: str,
	topic: str,
	achievement_standards: str,
	schema: Dict[str, Any],
) -> str:
	return (
		f"Create 3-5 alternative core learning objectives for a lesson on '{topic}' "
		f"for {grade_level} ({semester}) {subject}.\n"
		f"Align them with these achievement standards:\n{achievement_standards or '(none given)'}\n"
		"Each objective must be observable and phrased as \"학생들은 ~할 수 있다.\"\n"
		"Respond in Korean within a JSON object with an \"objectives\" array.\n\n"
		f"{_schema_block(schema)}"
	)


def build_table_plan_prompt(inputs: LessonPlanInputs, schema: Dict[str, Any]) -> str:
	return (
		"You are an experienced Korean teacher writing a 교수·학습 과정안 (table-format lesson plan).\n\n"
		f"{_lesson_block(inputs)}\n"
		"**Generation Instructions:**\n"
		"1. metadata: fill lessonTitle, subject, gradeLevel, topic, objectives, duration and a list of materials.\n"
		"2. steps: use the phases 도입, 전개, 정리. For each step give a duration, the learning process, "
		"teacherActivities, studentActivities, and materialsAndNotes (prefix materials with '·' and notes with '※').\n"
		"3. evaluationPlan.criteria: 1-3 criteria with content, method and the levels excellent / good / needsImprovement.\n"
		"4. Respond strictly in JSON, written entirely in Korean.\n\n"
		f"{_schema_block(schema)}"
	)


def build_worksheet_prompt(inputs: LessonPlanInputs, schema: Dict[str, Any]) -> str:
	return (
		"You are designing a leveled student worksheet following UDL principles.\n\n"
		f"{_lesson_block(inputs)}\n"
		"**Generation Instructions:**\n"
		"1. Create exactly three levels with levelName '기본', '보충' and '심화'.\n"
		"2. Each level has a title and 1-3 activities with title, description (instructions) and content "
		"(the questions or tasks students complete).\n"
		"3. For activities that benefit from a picture, add an imagePrompt describing a simple illustration "
		"without any text in it.\n"
		"4. Respond strictly in JSON, written entirely in Korean.\n\n"
		f"{_schema_block(schema)}"
	)


def build_udl_evaluation_prompt(inputs: LessonPlanInputs, schema: Dict[str, Any]) -> str:
	return (
		"You are an assessment specialist writing a UDL-based evaluation plan for a Korean classroom.\n\n"
		f"{_lesson_block(inputs)}\n"
		"**Generation Instructions:**\n"
		"1. Give a title, a description, unitLesson, evaluationTiming and evaluationTypes "
		"(e.g. 관찰평가, 서술형평가, 자기평가).\n"
		"2. Write evaluationIntentAndNotices and achievementStandardLevels A, B, C for the achievement standard.\n"
		"3. Create 1-3 tasks with taskTitle, taskDescription, udlConnections (which UDL guidelines the task uses) "
		"and levels advanced / proficient / basic, each with a description and criteria.\n"
		"4. Provide exampleAnswers.\n"
		"5. Respond strictly in JSON, written entirely in Korean.\n\n"
		f"{_schema_block(schema)}"
	)


def build_process_evaluation_prompt(
	inputs: LessonPlanInputs,
	udl_evaluation: Optional[UdlEvaluationPlan],
	schema: Dict[str, Any],
) -> str:
	evaluation_json = json.dumps(udl_evaluation.to_json_dict(), ensure_ascii=False) if udl_evaluation else "(none)"
	return (
		"You are writing a 과정중심평가지 (process-focused evaluation worksheet) that a teacher fills in per student.\n\n"
		f"{_lesson_block(inputs)}\n"
		f"[UDL Evaluation Plan]\n{evaluation_json}\n\n"
		"**Generation Instructions:**\n"
		"1. Base the evaluationItems on the tasks of the UDL evaluation plan; each has a criterion and the levels "
		"excellent / good / needsImprovement.\n"
		"2. Leave studentInfo values empty so the teacher can fill them in.\n"
		"3. Write an overallDescription and empty-or-guiding overallFeedback texts (teacherComment, studentReflection).\n"
		"4. Respond strictly in JSON, written entirely in Korean.\n\n"
		f"{_schema_block(schema)}"
	)


def build_image_prompt(activity_title: str, activity_content: str, image_prompt: Optional[str]) -> str:
	return (
		"Create a simple, clear educational illustration for an elementary school worksheet.\n\n"
		"[Context]\n"
		f"- Activity Title: \"{activity_title}\"\n"
		f"- Visual Idea: \"{image_prompt or activity_title}\"\n"
		f"- Content Context: \"{activity_content[:100]}...\"\n\n"
		"[Style Guide]\n"
		"- Style: Clean line art or simple flat vector illustration.\n"
		"- Background: Pure white background.\n"
		"- Target Audience: Elementary school students.\n\n"
		"[Critical Rules]\n"
		"- ABSOLUTELY NO TEXT, NO CHARACTERS, NO LETTERS inside the image.\n"
		"- Focus ONLY on visual elements."
	)


IMAGE_NEGATIVE_PROMPT = "text, writing, letters, numbers, symbols, watermark, blurry, distorted"
