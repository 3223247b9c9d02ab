from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from ..views.documents import VIEWS, render_view
from ..views.pages import render_app_page
from ..views.print_layout import render_print_layout
from ..workspace import Workspace
from .deps import get_workspace

router = APIRouter(tags=["pages"])


def _known_view(view: str) -> str:
	if view not in VIEWS:
		raise HTTPException(status_code=404, detail=f"unknown view: {view}")
	return view


@router.get("/app", response_class=HTMLResponse, include_in_schema=False)
async def app_page(view: str = Query("udl"), ws: Workspace = Depends(get_workspace)):
	return render_app_page(ws, _known_view(view))


@router.get("/print", response_class=HTMLResponse, include_in_schema=False)
async def print_page(ws: Workspace = Depends(get_workspace)):
	plan = ws.view_plan()
	if plan is None:
		raise HTTPException(status_code=404, detail="인쇄할 지도안이 없습니다.")
	return render_print_layout(plan)


@router.get("/view/{view}", response_class=HTMLResponse)
async def document_fragment(view: str, ws: Workspace = Depends(get_workspace)):
	"""One document rendered as an HTML fragment, in edit form while editing."""
	_known_view(view)
	plan = ws.view_plan()
	if plan is None:
		raise HTTPException(status_code=404, detail="표시할 지도안이 없습니다.")
	body = render_view(plan, view, ws.is_editing)
	if body is None:
		raise HTTPException(status_code=404, detail=f"{VIEWS[view].label}이(가) 아직 생성되지 않았습니다.")
	return body
