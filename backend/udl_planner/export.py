"""Standalone HTML / Word-compatible downloads of a single plan document."""
from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Optional

from .schemas import GeneratedLessonPlan
from .views.documents import VIEWS, document_for, render_view
from .views.styles import BASE_CSS, PRINT_CSS

EXPORT_FORMATS = ("html", "doc")

_UNSAFE_FILENAME = re.compile(r'[\\/:*?"<>|\r\n\t]+')


@dataclass(frozen=True)
class ExportedDocument:
	title: str
	filename: str
	media_type: str
	content: str


def document_title(plan: GeneratedLessonPlan, view: str) -> str:
	document = document_for(plan, view)
	if view == "udl":
		return plan.lesson_title or "보편적 학습 설계 지도안"
	if view == "table":
		return document.metadata.lesson_title or plan.lesson_title
	return getattr(document, "title", "") or plan.lesson_title


def safe_filename(title: str) -> str:
	cleaned = _UNSAFE_FILENAME.sub("_", title).strip(" ._")
	return cleaned or "지도안"


def _html_document(title: str, subtitle: str, body: str, *, word: bool) -> str:
	if word:
		opening = (
			'<html xmlns:o="urn:schemas-microsoft-com:office:office" '
			'xmlns:w="urn:schemas-microsoft-com:office:word" '
			'xmlns="http://www.w3.org/TR/REC-html40" lang="ko">'
		)
	else:
		opening = '<html lang="ko">'
	return (
		"<!DOCTYPE html>\n"
		f"{opening}\n"
		"<head>\n"
		'<meta charset="UTF-8">\n'
		'<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
		f"<title>{html.escape(title)}</title>\n"
		f"<style>{BASE_CSS}{PRINT_CSS}</style>\n"
		"</head>\n"
		"<body>\n"
		f"<h1>{html.escape(title)}</h1>\n"
		f'<p class="subtitle">{html.escape(subtitle)}</p>\n'
		f"{body}\n"
		"</body>\n"
		"</html>\n"
	)


def export_plan(plan: GeneratedLessonPlan, view: str, fmt: str = "html") -> Optional[ExportedDocument]:
	"""Serialize one document of ``plan``; None when that document was not generated."""
	if view not in VIEWS:
		raise KeyError(view)
	if fmt not in EXPORT_FORMATS:
		raise ValueError(f"format must be one of {EXPORT_FORMATS}")
	body = render_view(plan, view)
	if body is None:
		return None
	title = document_title(plan, view)
	subtitle = (plan.achievement_standard or "") if view == "udl" else VIEWS[view].label
	word = fmt == "doc"
	content = _html_document(title, subtitle, body, word=word)
	if word:
		# BOM so Word detects UTF-8
		return ExportedDocument(title, f"{safe_filename(title)}.doc", "application/msword", "\ufeff" + content)
	return ExportedDocument(title, f"{safe_filename(title)}.html", "text/html; charset=utf-8", content)
