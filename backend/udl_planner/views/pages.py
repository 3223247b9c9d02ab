"""The single application page: form, saved plans and the display panel."""
from __future__ import annotations

import html
from typing import List

from ..curriculum import GRADE_LEVELS, SEMESTERS, SPECIAL_NEEDS_SUGGESTIONS, SUBJECTS
from ..workspace import Workspace
from .documents import VIEWS, render_view
from .fields import text
from .styles import APP_CSS, BASE_CSS

_LOADING_LABELS = {
	"plan": "UDL 지도안 생성 중",
	"revision": "지도안 수정 중",
	"table": "표 형식 지도안 생성 중",
	"worksheet": "활동지 생성 중",
	"udl-evaluation": "UDL 평가 계획 생성 중",
	"process-evaluation": "과정중심평가지 생성 중",
}


def _options(name: str, choices: List[str], selected: str) -> str:
	items = "".join(
		f'<option value="{html.escape(c)}"{" selected" if c == selected else ""}>{html.escape(c)}</option>'
		for c in choices
	)
	return f'<select name="{name}" data-input="{name}">{items}</select>'


def _input(name: str, label: str, value: str, *, multiline: bool = False) -> str:
	if multiline:
		field = f'<textarea name="{name}" data-input="{name}">{html.escape(value or "")}</textarea>'
	else:
		field = f'<input type="text" name="{name}" data-input="{name}" value="{html.escape(value or "")}" />'
	return f"<label>{html.escape(label)}{field}</label>"


def _suggestions(items: List[str], action: str, error: str | None) -> str:
	parts = []
	if error:
		parts.append(f'<p class="error">{html.escape(error)}</p>')
	if items:
		buttons = "".join(
			f'<li><button type="button" data-action="{action}" data-value="{html.escape(i)}">{html.escape(i)}</button></li>'
			for i in items
		)
		parts.append(f'<ul class="suggestions">{buttons}</ul>')
	return "".join(parts)


def render_form_panel(ws: Workspace) -> str:
	inputs = ws.inputs
	loading_plan = "plan" in ws.loading
	submit = (
		'<button type="button" data-action="cancel">취소</button>'
		if loading_plan
		else '<button type="button" data-action="generate">UDL 지도안 생성</button>'
	)
	needs = "".join(f'<option value="{html.escape(s)}"></option>' for s in SPECIAL_NEEDS_SUGGESTIONS)
	return (
		'<div class="panel form-panel no-print"><h2>수업 정보 입력</h2>'
		f"<label>학년{_options('gradeLevel', GRADE_LEVELS, inputs.grade_level)}</label>"
		f"<label>학기{_options('semester', SEMESTERS, inputs.semester)}</label>"
		f"<label>과목{_options('subject', SUBJECTS, inputs.subject)}</label>"
		f"{_input('unitName', '단원명', inputs.unit_name)}"
		'<button type="button" data-action="suggest-standards">성취기준 추천</button>'
		f"{_suggestions(ws.standard_suggestions, 'toggle-standard', ws.standard_error)}"
		f"{_input('achievementStandards', '성취기준', inputs.achievement_standards, multiline=True)}"
		'<button type="button" data-action="suggest-topics">주제 추천</button>'
		f"{_suggestions(ws.topic_suggestions, 'select-topic', ws.topic_error)}"
		f"{_input('topic', '수업 주제', inputs.topic)}"
		'<button type="button" data-action="suggest-objectives">학습 목표 추천</button>'
		f"{_suggestions(ws.objective_suggestions, 'select-objective', ws.objective_error)}"
		f"{_input('objectives', '학습 목표', inputs.objectives, multiline=True)}"
		f"{_input('duration', '수업 시간', inputs.duration)}"
		f'<datalist id="special-needs">{needs}</datalist>'
		f"{_input('specialNeeds', '특수교육 대상 학생', inputs.special_needs or '')}"
		f"{_input('studentCharacteristics', '학생 특성', inputs.student_characteristics or '', multiline=True)}"
		f"{submit}"
		"</div>"
	)


def render_saved_plans_panel(ws: Workspace) -> str:
	plans = [p for p in ws.store.saved if p.id]
	if not plans:
		body = "<p>저장된 지도안이 없습니다. 지도안을 생성하고 저장해 보세요!</p>"
	else:
		body = "".join(
			f'<div class="saved-plan" data-plan-id="{html.escape(p.id)}">'
			f'<a href="#" data-action="select-plan" data-value="{html.escape(p.id)}">{html.escape(p.lesson_title)}</a>'
			f'<button type="button" data-action="delete-plan" data-value="{html.escape(p.id)}" '
			f'aria-label="\'{html.escape(p.lesson_title)}\' 지도안 삭제">삭제</button>'
			"</div>"
			for p in plans
		)
	return f'<div class="panel saved-plans no-print"><h2>저장된 지도안</h2>{body}</div>'


def render_display_panel(ws: Workspace, view: str = "udl") -> str:
	if "plan" in ws.loading:
		return (
			'<div class="panel display-panel loading"><h3>UDL 지도안 생성 중</h3>'
			"<p>AI가 맞춤형 지도안을 만들고 있습니다. 잠시만 기다려 주세요.</p></div>"
		)
	plan = ws.view_plan()
	if plan is None:
		if ws.error:
			return f'<div class="panel display-panel"><div class="error"><h3>오류가 발생했습니다</h3><p>{html.escape(ws.error)}</p></div></div>'
		return (
			'<div class="panel display-panel empty"><h3>지도안이 기다리고 있습니다</h3>'
			"<p>수업 정보를 입력하면 AI가 생성한 UDL 기반 지도안이 여기에 표시되어 모두를 위한 학습에 영감을 줄 것입니다.</p></div>"
		)

	active = ' class="active"'
	tabs = "".join(
		f'<button type="button" data-view="{name}"{active if name == view else ""}>{html.escape(entry.label)}</button>'
		for name, entry in VIEWS.items()
	)
	body = render_view(plan, view, ws.is_editing)
	if body is None:
		kind = VIEWS[view].kind
		if kind in ws.loading:
			body = f"<p>{html.escape(_LOADING_LABELS[kind])}...</p>"
		elif ws.is_editing:
			body = f"<p>{html.escape(VIEWS[view].label)}은(는) 수정을 마친 뒤 생성할 수 있습니다.</p>"
		else:
			body = f'<button type="button" data-action="generate-sibling" data-value="{kind}">{html.escape(VIEWS[view].label)} 생성</button>'

	if ws.is_editing:
		actions = (
			'<button type="button" data-action="save-edits">수정 완료</button>'
			'<button type="button" data-action="cancel-edit">취소</button>'
		)
	else:
		save = "" if plan.id else '<button type="button" data-action="save-plan">저장</button>'
		actions = (
			f"{save}"
			'<button type="button" data-action="start-edit">수정</button>'
			'<a href="/print" target="_blank">인쇄</a>'
			f'<a href="/export/{view}?format=doc">Word로 내보내기</a>'
			f'<a href="/export/{view}?format=html">HTML로 내보내기</a>'
		)
	error = f'<p class="error">{html.escape(ws.error)}</p>' if ws.error else ""
	revision = "" if ws.is_editing else (
		'<div class="revision no-print"><textarea name="feedback" placeholder="수정 요청 사항을 입력하세요"></textarea>'
		'<button type="button" data-action="revise">수정 요청</button></div>'
	)
	return (
		'<div class="panel display-panel">'
		f"<h2>{html.escape(plan.lesson_title)}</h2>"
		f"<p><strong>학년:</strong> {text(plan.grade_level)} <strong>과목:</strong> {text(plan.subject)}</p>"
		f'<div class="actions no-print">{actions}</div>'
		f"{error}"
		f'<div class="tabs no-print">{tabs}</div>'
		f'<div class="document" data-current-view="{view}">{body}</div>'
		f"{revision}"
		"</div>"
	)


_PAGE_SCRIPT = """
const api = (method, url, body) => fetch(url, {
	method, headers: {'Content-Type': 'application/json'},
	body: body === undefined ? undefined : JSON.stringify(body),
}).then(() => window.location.reload());
document.querySelectorAll('[data-input]').forEach(el => el.addEventListener('change', () =>
	fetch('/inputs', {method: 'PATCH', headers: {'Content-Type': 'application/json'}, body: JSON.stringify({name: el.dataset.input, value: el.value})})));
document.querySelectorAll('textarea.editable').forEach(el => el.addEventListener('change', () =>
	fetch('/plans/edit', {method: 'PATCH', headers: {'Content-Type': 'application/json'}, body: JSON.stringify({path: el.dataset.path, value: el.value})})));
document.querySelectorAll('[data-view]').forEach(el => el.addEventListener('click', () => {
	window.location.search = '?view=' + el.dataset.view;
}));
document.querySelectorAll('[data-move-step]').forEach(el => el.addEventListener('click', () =>
	api('POST', '/plans/edit/move-step', {index: Number(el.dataset.moveStep), direction: el.dataset.direction})));
document.querySelectorAll('button.generate-image').forEach(el => el.addEventListener('click', async () => {
	el.disabled = true;
	const r = await fetch('/api/generate-image', {method: 'POST', headers: {'Content-Type': 'application/json'},
		body: JSON.stringify({title: el.dataset.title, content: el.dataset.content, imagePrompt: el.dataset.imagePrompt})});
	const data = await r.json();
	if (!r.ok) { alert(data.error); el.disabled = false; return; }
	api('POST', '/plans/current/worksheet/image', {path: el.dataset.path, image: data.image});
}));
const actions = {
	'generate': () => api('POST', '/plans/generate'),
	'cancel': () => api('POST', '/plans/cancel'),
	'suggest-topics': () => api('POST', '/suggest/topics'),
	'suggest-standards': () => api('POST', '/suggest/standards'),
	'suggest-objectives': () => api('POST', '/suggest/objectives', {}),
	'select-topic': v => api('POST', '/suggest/objectives', {topic: v}),
	'toggle-standard': v => api('POST', '/inputs/standards/toggle', {standard: v}),
	'select-objective': v => api('POST', '/inputs/objective', {objective: v}),
	'select-plan': v => api('POST', '/plans/' + encodeURIComponent(v) + '/select'),
	'delete-plan': v => api('DELETE', '/plans/' + encodeURIComponent(v)),
	'save-plan': () => api('POST', '/plans/save'),
	'start-edit': () => api('POST', '/plans/edit/start'),
	'save-edits': () => api('POST', '/plans/edit/save'),
	'cancel-edit': () => api('POST', '/plans/edit/cancel'),
	'generate-sibling': v => api('POST', '/plans/current/' + v),
	'revise': () => api('POST', '/plans/revise', {feedback: document.querySelector('textarea[name=feedback]').value}),
};
document.querySelectorAll('[data-action]').forEach(el => el.addEventListener('click', e => {
	e.preventDefault();
	actions[el.dataset.action](el.dataset.value);
}));
"""


def render_app_page(ws: Workspace, view: str = "udl") -> str:
	return (
		"<!DOCTYPE html>"
		'<html lang="ko"><head><meta charset="UTF-8" />'
		'<meta name="viewport" content="width=device-width, initial-scale=1.0" />'
		"<title>UDL 지도안 생성기</title>"
		f"<style>{BASE_CSS}{APP_CSS}</style>"
		"</head><body>"
		'<header class="no-print"><h1>UDL 지도안 생성기</h1></header>'
		'<main class="layout">'
		f"<div>{render_form_panel(ws)}</div>"
		f"<div>{render_saved_plans_panel(ws)}{render_display_panel(ws, view)}</div>"
		"</main>"
		f"<script>{_PAGE_SCRIPT}</script>"
		"</body></html>"
	)
