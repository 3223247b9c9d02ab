from __future__ import annotations

import html

from ..schemas import GeneratedLessonPlan
from .documents import VIEWS, render_view
from .styles import BASE_CSS, PRINT_CSS


def render_print_layout(plan: GeneratedLessonPlan) -> str:
	"""All generated documents of a plan on one printable page, one section per page."""
	sections = []
	for index, (view, entry) in enumerate(VIEWS.items()):
		body = render_view(plan, view)
		if body is None:
			continue
		page_break = "" if index == 0 else " page-break-before"
		sections.append(
			f'<div class="print-section{page_break}">'
			f'<h2 class="print-section-header">{html.escape(entry.label)}</h2>'
			f"{body}"
			"</div>"
		)
	title = html.escape(plan.lesson_title)
	return (
		"<!DOCTYPE html>"
		'<html lang="ko"><head><meta charset="UTF-8" />'
		f"<title>{title}</title>"
		f"<style>{BASE_CSS}{PRINT_CSS}</style>"
		"</head><body>"
		'<div class="printable-content">'
		'<div class="page-break-avoid print-heading">'
		f"<h1>{title}</h1>"
		f"<p><strong>학년:</strong> {html.escape(plan.grade_level)} &nbsp; <strong>과목:</strong> {html.escape(plan.subject)}</p>"
		"</div>"
		f"{''.join(sections)}"
		"</div>"
		'<div class="no-print"><button type="button" onclick="window.print()">인쇄</button> '
		'<a href="/app">닫기</a></div>'
		"</body></html>"
	)
