from __future__ import annotations

import html

from ..schemas import TableLessonPlan
from .fields import editable_field, editable_list, text

_BASE = "tablePlan"


def _move_buttons(index: int, count: int) -> str:
	up_disabled = " disabled" if index == 0 else ""
	down_disabled = " disabled" if index == count - 1 else ""
	return (
		'<div class="move-step">'
		f'<button type="button" data-move-step="{index}" data-direction="up" title="위로 이동"{up_disabled}>▲</button>'
		f'<button type="button" data-move-step="{index}" data-direction="down" title="아래로 이동"{down_disabled}>▼</button>'
		"</div>"
	)


def render_table_plan(plan: TableLessonPlan, editing: bool = False) -> str:
	meta = plan.metadata
	metadata_table = (
		'<table class="plan-table"><tbody>'
		f"<tr><th>과목</th><td>{text(meta.subject)}</td><th>학년</th><td>{text(meta.grade_level)}</td></tr>"
		f'<tr><th>수업 주제</th><td colspan="3">{editable_field(f"{_BASE}.metadata.topic", meta.topic, editing)}</td></tr>'
		f'<tr><th>학습 목표</th><td colspan="3">{editable_field(f"{_BASE}.metadata.objectives", meta.objectives, editing)}</td></tr>'
		f"<tr><th>수업 시간</th><td>{editable_field(f'{_BASE}.metadata.duration', meta.duration, editing, multiline=False)}</td>"
		f"<th>준비물</th><td>{editable_field(f'{_BASE}.metadata.materials', ', '.join(meta.materials), editing)}</td></tr>"
		"</tbody></table>"
	)

	step_rows = []
	for i, step in enumerate(plan.steps):
		base = f"{_BASE}.steps.{i}"
		mover = _move_buttons(i, len(plan.steps)) if editing else ""
		step_rows.append(
			"<tr>"
			f"<td>{mover}{editable_field(f'{base}.phase', step.phase, editing, css_class='phase')}"
			f"{editable_field(f'{base}.duration', step.duration, editing)}</td>"
			f"<td>{editable_field(f'{base}.process', step.process, editing)}</td>"
			'<td><p class="actor">T:</p>'
			f"{editable_list(f'{base}.teacherActivities', step.teacher_activities, editing)}"
			'<p class="actor">S:</p>'
			f"{editable_list(f'{base}.studentActivities', step.student_activities, editing)}</td>"
			f"<td>{editable_list(f'{base}.materialsAndNotes', step.materials_and_notes, editing, css_class='plain')}</td>"
			"</tr>"
		)

	criteria = []
	for i, c in enumerate(plan.evaluation_plan.criteria):
		base = f"{_BASE}.evaluationPlan.criteria.{i}"
		criteria.append(
			'<table class="plan-table criterion"><tbody>'
			f"<tr><th>평가 내용</th><td>{editable_field(f'{base}.content', c.content, editing)}</td></tr>"
			f"<tr><th>평가 방법</th><td>{editable_field(f'{base}.method', c.method, editing)}</td></tr>"
			f"<tr><th>잘함</th><td>{editable_field(f'{base}.excellent', c.excellent, editing)}</td></tr>"
			f"<tr><th>보통</th><td>{editable_field(f'{base}.good', c.good, editing)}</td></tr>"
			f"<tr><th>노력요함</th><td>{editable_field(f'{base}.needsImprovement', c.needs_improvement, editing)}</td></tr>"
			"</tbody></table>"
		)

	return (
		'<div class="table-plan">'
		f"<h2>{editable_field(f'{_BASE}.metadata.lessonTitle', meta.lesson_title, editing, multiline=False)}</h2>"
		f"{metadata_table}"
		"<h3>교수·학습 과정</h3>"
		'<table class="plan-table steps"><thead><tr>'
		"<th>단계 (시간)</th><th>학습 과정</th><th>교수·학습 활동</th><th>자료(·) 및 유의점(※)</th>"
		f"</tr></thead><tbody>{''.join(step_rows)}</tbody></table>"
		f"<h3>{html.escape('평가 계획')}</h3>"
		f"{''.join(criteria)}"
		"</div>"
	)
