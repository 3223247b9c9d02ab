from __future__ import annotations

import html

from ..schemas import Worksheet
from .fields import editable_field

LEVEL_CLASSES = {"기본": "level-basic", "보충": "level-support", "심화": "level-advanced"}


def _activity_image(path: str, title: str, content: str, image_prompt: str | None, image_url: str | None, editing: bool) -> str:
	if image_url:
		return f'<img class="activity-image" src="{html.escape(image_url)}" alt="{html.escape(title)}" />'
	if image_prompt and not editing:
		# The page script posts these to the image proxy and stores the result
		return (
			f'<button type="button" class="generate-image no-print" data-path="{html.escape(path)}.imageUrl" '
			f'data-title="{html.escape(title)}" data-content="{html.escape(content)}" '
			f'data-image-prompt="{html.escape(image_prompt)}">삽화 생성</button>'
		)
	return ""


def render_worksheet(plan: Worksheet, editing: bool = False) -> str:
	levels = []
	for l_index, level in enumerate(plan.levels):
		base = f"worksheet.levels.{l_index}"
		activities = []
		for a_index, activity in enumerate(level.activities):
			a_base = f"{base}.activities.{a_index}"
			activities.append(
				'<div class="activity">'
				f"<h5>{editable_field(f'{a_base}.title', activity.title, editing)}</h5>"
				f"{editable_field(f'{a_base}.description', activity.description, editing, css_class='activity-description')}"
				f"{editable_field(f'{a_base}.content', activity.content, editing, css_class='activity-content')}"
				f"{_activity_image(a_base, activity.title, activity.content, activity.image_prompt, activity.image_url, editing)}"
				"</div>"
			)
		css = LEVEL_CLASSES.get(level.level_name, "level-default")
		levels.append(
			f'<div class="worksheet-level-section {css}">'
			f'<span class="level-badge">{editable_field(f"{base}.levelName", level.level_name, editing, css_class="inline", multiline=False)}</span>'
			f"<h4>{editable_field(f'{base}.title', level.title, editing, css_class='inline', multiline=False)}</h4>"
			f"{''.join(activities)}"
			"</div>"
		)
	return (
		'<div class="worksheet">'
		f"<h2>{editable_field('worksheet.title', plan.title, editing, multiline=False)}</h2>"
		f"{editable_field('worksheet.description', plan.description, editing, css_class='description')}"
		f"{''.join(levels)}"
		"</div>"
	)
