from __future__ import annotations

import html

from ..schemas import AchievementStandardLevels, ProcessEvaluationWorksheet, UdlEvaluationPlan
from .fields import editable_field, text

TASK_LEVEL_NAMES = (("advanced", "상"), ("proficient", "중"), ("basic", "하"))


def _standard_levels(levels: AchievementStandardLevels | None, editing: bool) -> str:
	if levels is None:
		return ""
	rows = "".join(
		f"<tr><th>{key}</th><td>{editable_field(f'udlEvaluation.achievementStandardLevels.{key}', getattr(levels, key), editing)}</td></tr>"
		for key in ("A", "B", "C")
	)
	return f'<h3>성취기준 수준</h3><table class="plan-table"><tbody>{rows}</tbody></table>'


def render_udl_evaluation(plan: UdlEvaluationPlan, editing: bool = False) -> str:
	base = "udlEvaluation"
	overview = (
		'<table class="plan-table overview"><tbody>'
		f"<tr><th>단원(차시)</th><td>{editable_field(f'{base}.unitLesson', plan.unit_lesson, editing, multiline=False)}</td>"
		f"<th>평가 시기</th><td>{editable_field(f'{base}.evaluationTiming', plan.evaluation_timing, editing, multiline=False)}</td></tr>"
		f'<tr><th>평가 유형</th><td colspan="3">{text(", ".join(plan.evaluation_types))}</td></tr>'
		f'<tr><th>평가 의도 및 유의점</th><td colspan="3">{editable_field(f"{base}.evaluationIntentAndNotices", plan.evaluation_intent_and_notices, editing)}</td></tr>'
		"</tbody></table>"
	)

	tasks = []
	for t_index, task in enumerate(plan.tasks):
		t_base = f"{base}.tasks.{t_index}"
		connections = "".join(f'<span class="udl-tag">{html.escape(c)}</span>' for c in task.udl_connections)
		level_rows = "".join(
			f'<tr class="task-level-{key}"><th>{label}</th>'
			f"<td>{editable_field(f'{t_base}.levels.{key}.description', getattr(task.levels, key).description, editing)}</td>"
			f"<td>{editable_field(f'{t_base}.levels.{key}.criteria', getattr(task.levels, key).criteria, editing)}</td></tr>"
			for key, label in TASK_LEVEL_NAMES
		)
		tasks.append(
			'<div class="evaluation-task">'
			f"<h4>{editable_field(f'{t_base}.taskTitle', task.task_title, editing, multiline=False)}</h4>"
			f"{editable_field(f'{t_base}.taskDescription', task.task_description, editing)}"
			f'<div class="udl-connections">{connections}</div>'
			'<table class="plan-table"><thead><tr><th>수준</th><th>과제</th><th>기준</th></tr></thead>'
			f"<tbody>{level_rows}</tbody></table>"
			"</div>"
		)

	examples = ""
	if plan.example_answers is not None:
		examples = f"<h3>예시 답안</h3>{editable_field(f'{base}.exampleAnswers', plan.example_answers, editing)}"

	return (
		'<div class="udl-evaluation">'
		f"<h2>{editable_field(f'{base}.title', plan.title, editing, multiline=False)}</h2>"
		f"{editable_field(f'{base}.description', plan.description, editing, css_class='description')}"
		f"{overview}"
		f"{_standard_levels(plan.achievement_standard_levels, editing)}"
		f"{''.join(tasks)}"
		f"{examples}"
		"</div>"
	)


def render_process_evaluation(plan: ProcessEvaluationWorksheet, editing: bool = False) -> str:
	base = "processEvaluationWorksheet"
	info = plan.student_info
	student_row = (
		'<table class="plan-table student-info"><tbody><tr>'
		f"<th>학년</th><td>{editable_field(f'{base}.studentInfo.grade', info.grade, editing, multiline=False)}</td>"
		f"<th>반</th><td>{editable_field(f'{base}.studentInfo.class', info.class_, editing, multiline=False)}</td>"
		f"<th>번호</th><td>{editable_field(f'{base}.studentInfo.number', info.number, editing, multiline=False)}</td>"
		f"<th>이름</th><td>{editable_field(f'{base}.studentInfo.name', info.name, editing, multiline=False)}</td>"
		"</tr></tbody></table>"
	)
	item_rows = "".join(
		"<tr>"
		f"<td>{editable_field(f'{base}.evaluationItems.{i}.criterion', item.criterion, editing)}</td>"
		f"<td><strong>상:</strong> {editable_field(f'{base}.evaluationItems.{i}.levels.excellent', item.levels.excellent, editing)}"
		f"<strong>중:</strong> {editable_field(f'{base}.evaluationItems.{i}.levels.good', item.levels.good, editing)}"
		f"<strong>하:</strong> {editable_field(f'{base}.evaluationItems.{i}.levels.needsImprovement', item.levels.needs_improvement, editing)}</td>"
		"</tr>"
		for i, item in enumerate(plan.evaluation_items)
	)
	return (
		'<div class="process-evaluation">'
		f"<h2>{editable_field(f'{base}.title', plan.title, editing, multiline=False)}</h2>"
		f"{student_row}"
		f"{editable_field(f'{base}.overallDescription', plan.overall_description, editing, css_class='description')}"
		'<table class="plan-table"><thead><tr><th>평가 기준</th><th>수준별 성취 내용</th></tr></thead>'
		f"<tbody>{item_rows}</tbody></table>"
		"<h3>종합 의견</h3>"
		f"<p><strong>교사 종합 의견:</strong></p>{editable_field(f'{base}.overallFeedback.teacherComment', plan.overall_feedback.teacher_comment, editing)}"
		f"<p><strong>자기 성찰:</strong></p>{editable_field(f'{base}.overallFeedback.studentReflection', plan.overall_feedback.student_reflection, editing)}"
		"</div>"
	)
