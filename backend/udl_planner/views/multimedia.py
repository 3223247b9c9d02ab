from __future__ import annotations

import html
from typing import List

from ..generation import search_url
from ..schemas import MultimediaResource


def render_multimedia_links(resources: List[MultimediaResource]) -> str:
	if not resources:
		return ""
	links = "".join(
		f'<a href="{html.escape(search_url(r))}" target="_blank" rel="noopener noreferrer">'
		f"- [{html.escape(r.platform)}] {html.escape(r.title)} 검색하기</a>"
		for r in resources
	)
	return f'<div class="multimedia"><h3>💡 추천 멀티미디어 학습 자료</h3>{links}</div>'
