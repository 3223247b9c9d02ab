from __future__ import annotations

import html

from ..schemas import GeneratedLessonPlan
from .fields import editable_field, text
from .multimedia import render_multimedia_links


def render_udl_plan(plan: GeneratedLessonPlan, editing: bool = False) -> str:
	objectives = plan.detailed_objectives
	rows = [
		("전체", "detailedObjectives.overall", objectives.overall),
		("일부", "detailedObjectives.some", objectives.some),
		("소수", "detailedObjectives.few", objectives.few),
	]
	objective_rows = "".join(
		f"<tr><th>{label}</th><td>{editable_field(path, value, editing)}</td></tr>"
		for label, path, value in rows
	)

	principles = []
	for p_index, principle in enumerate(plan.udl_principles):
		base = f"udlPrinciples.{p_index}"
		strategies = "".join(
			"<tr>"
			f"<td>{editable_field(f'{base}.strategies.{s_index}.guideline', s.guideline, editing)}</td>"
			f"<td>{editable_field(f'{base}.strategies.{s_index}.strategy', s.strategy, editing)}</td>"
			f"<td>{editable_field(f'{base}.strategies.{s_index}.example', s.example, editing)}</td>"
			"</tr>"
			for s_index, s in enumerate(principle.strategies)
		)
		principles.append(
			'<div class="udl-principle">'
			f"<h4>{editable_field(f'{base}.principle', principle.principle, editing, multiline=False)}</h4>"
			f"{editable_field(f'{base}.description', principle.description, editing, css_class='principle-description')}"
			'<table class="inner-table"><thead><tr><th>지침</th><th>전략</th><th>적용 예시</th></tr></thead>'
			f"<tbody>{strategies}</tbody></table>"
			"</div>"
		)

	methods = "".join(
		f"<li>{editable_field(f'assessment.methods.{i}', m, editing, css_class='inline')}</li>"
		for i, m in enumerate(plan.assessment.methods)
	)

	return (
		'<div class="udl-plan">'
		"<h3>1단계: 목표 확인 및 설정하기</h3>"
		'<table class="plan-table"><tbody>'
		f"<tr><th>교육과정 성취기준</th><td>{text(plan.achievement_standard)}</td></tr>"
		f"{objective_rows}"
		"</tbody></table>"
		"<h3>2단계: 상황 분석하기</h3>"
		'<table class="plan-table"><tbody>'
		f"<tr><th>상황 분석</th><td>{editable_field('contextAnalysis', plan.context_analysis, editing)}</td></tr>"
		f"<tr><th>학습자 분석</th><td>{editable_field('learnerAnalysis', plan.learner_analysis, editing)}</td></tr>"
		"</tbody></table>"
		"<h3>3단계: 보편적 학습 설계 원리 적용하기</h3>"
		f"{''.join(principles)}"
		f"<h3>{html.escape(plan.assessment.title or '평가')}</h3>"
		f"<ul>{methods}</ul>"
		f"{render_multimedia_links(plan.multimedia_resources or [])}"
		"</div>"
	)
