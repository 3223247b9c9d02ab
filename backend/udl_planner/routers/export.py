from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..export import EXPORT_FORMATS, export_plan
from ..views.documents import VIEWS
from ..workspace import Workspace
from .deps import get_workspace

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/{view}")
async def export_document(view: str, format: str = Query("html"), ws: Workspace = Depends(get_workspace)):
	if view not in VIEWS:
		raise HTTPException(status_code=404, detail=f"unknown view: {view}")
	if format not in EXPORT_FORMATS:
		raise HTTPException(status_code=400, detail=f"format must be one of {', '.join(EXPORT_FORMATS)}")
	plan = ws.view_plan()
	if plan is None:
		raise HTTPException(status_code=404, detail="내보낼 지도안이 없습니다.")
	exported = export_plan(plan, view, format)
	if exported is None:
		raise HTTPException(status_code=404, detail=f"{VIEWS[view].label}이(가) 아직 생성되지 않았습니다.")
	return Response(
		content=exported.content,
		media_type=exported.media_type,
		headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(exported.filename)}"},
	)
