from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional

from ..schemas import GeneratedLessonPlan
from .evaluation import render_process_evaluation, render_udl_evaluation
from .table import render_table_plan
from .udl import render_udl_plan
from .worksheet import render_worksheet


class DocumentView(NamedTuple):
	label: str
	field: Optional[str]
	render: Callable[..., str]
	# Sibling generation kind that produces the document, if any
	kind: Optional[str]


VIEWS: Dict[str, DocumentView] = {
	"udl": DocumentView("UDL 지도안", None, render_udl_plan, None),
	"table": DocumentView("표 형식 지도안", "table_plan", render_table_plan, "table"),
	"worksheet": DocumentView("수준별 활동지", "worksheet", render_worksheet, "worksheet"),
	"udlEvaluation": DocumentView("UDL 평가 계획", "udl_evaluation", render_udl_evaluation, "udl-evaluation"),
	"processEvaluation": DocumentView("과정중심평가지", "process_evaluation_worksheet", render_process_evaluation, "process-evaluation"),
}


def document_for(plan: GeneratedLessonPlan, view: str):
	entry = VIEWS[view]
	return plan if entry.field is None else getattr(plan, entry.field)


def render_view(plan: GeneratedLessonPlan, view: str, editing: bool = False) -> Optional[str]:
	"""Render one document of the plan; None when that document does not exist yet."""
	document = document_for(plan, view)
	if document is None:
		return None
	return VIEWS[view].render(document, editing)
