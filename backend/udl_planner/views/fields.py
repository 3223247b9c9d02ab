"""Small HTML building blocks shared by the document views."""
from __future__ import annotations

import html
from typing import Iterable, Optional


def text(value: Optional[str]) -> str:
	"""Escape user text and keep its line breaks."""
	return html.escape(value or "").replace("\n", "<br />")


def editable_field(path: str, value: Optional[str], editing: bool, *, css_class: str = "", multiline: bool = True) -> str:
	if editing:
		rows = "" if multiline else ' rows="1"'
		return (
			f'<textarea class="editable {html.escape(css_class)}" name="{html.escape(path)}" '
			f'data-path="{html.escape(path)}"{rows}>{html.escape(value or "")}</textarea>'
		)
	cls = f' class="{html.escape(css_class)}"' if css_class else ""
	return f"<div{cls}>{text(value)}</div>"


def editable_list(path: str, items: Iterable[str], editing: bool, *, css_class: str = "") -> str:
	cls = f' class="{html.escape(css_class)}"' if css_class else ""
	rows = "".join(
		f"<li>{editable_field(f'{path}.{i}', item, editing, css_class='inline')}</li>"
		for i, item in enumerate(items)
	)
	return f"<ul{cls}>{rows}</ul>"


def section(title: str, body: str, *, css_class: str = "section") -> str:
	return f'<section class="{css_class}"><h3>{html.escape(title)}</h3>{body}</section>'
