import logging
from typing import Any, Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from ..errors import GenerationError, MissingPrerequisiteError, PlanBusyError
from ..gemini_client import GeminiClient
from ..schemas import SIBLING_FIELDS
from ..workspace import Workspace
from .deps import get_client, get_workspace

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])

NO_ACTIVE_PLAN = "현재 표시 중인 지도안이 없습니다."
NOT_EDITING = "수정 모드가 아닙니다."
EDITING = "수정 중에는 새 문서를 생성하거나 지도안을 수정 요청할 수 없습니다. 먼저 수정을 완료하거나 취소해 주세요."


class RevisionRequest(BaseModel):
	feedback: str


class FieldEdit(BaseModel):
	path: str
	value: Any


class StepMove(BaseModel):
	index: int
	direction: Literal["up", "down"]


class ActivityImage(BaseModel):
	path: str
	image: str


def _state(ws: Workspace) -> dict:
	plan = ws.view_plan()
	return {
		"plan": plan.to_json_dict() if plan is not None else None,
		"isEditing": ws.is_editing,
		"loading": sorted(ws.loading),
		"error": ws.error,
	}


@router.post("/generate")
async def generate_plan(ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	try:
		plan = await ws.generate_plan(client)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	if plan is None:
		return {"cancelled": True}
	return _state(ws)


@router.post("/cancel")
async def cancel_generation(ws: Workspace = Depends(get_workspace)):
	ws.cancel()
	return _state(ws)


@router.post("/revise")
async def revise_plan(req: RevisionRequest, ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	if not req.feedback.strip():
		raise HTTPException(status_code=400, detail="수정 요청 사항을 입력해 주세요.")
	if ws.current is None:
		raise HTTPException(status_code=404, detail=NO_ACTIVE_PLAN)
	if ws.is_editing:
		raise HTTPException(status_code=409, detail=EDITING)
	try:
		plan = await ws.revise_plan(client, req.feedback)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	if plan is None:
		return {"cancelled": True}
	return _state(ws)


@router.get("/current")
async def current_plan(ws: Workspace = Depends(get_workspace)):
	return _state(ws)


@router.post("/save")
async def save_plan(ws: Workspace = Depends(get_workspace)):
	if ws.current is None:
		raise HTTPException(status_code=404, detail=NO_ACTIVE_PLAN)
	ws.save()
	return _state(ws)


@router.get("")
async def list_plans(ws: Workspace = Depends(get_workspace)):
	return [{"id": p.id, "lessonTitle": p.lesson_title} for p in ws.store.saved]


@router.post("/edit/start")
async def start_edit(ws: Workspace = Depends(get_workspace)):
	try:
		ws.begin_edit()
	except LookupError:
		raise HTTPException(status_code=404, detail=NO_ACTIVE_PLAN)
	except PlanBusyError as e:
		raise HTTPException(status_code=409, detail=str(e))
	return _state(ws)


@router.patch("/edit")
async def edit_field(req: FieldEdit, ws: Workspace = Depends(get_workspace)):
	if not ws.is_editing:
		raise HTTPException(status_code=409, detail=NOT_EDITING)
	try:
		ws.edit_field(req.path, req.value)
	except (KeyError, IndexError, ValidationError) as e:
		raise HTTPException(status_code=400, detail=f"invalid field {req.path}: {e}")
	return _state(ws)


@router.post("/edit/move-step")
async def move_step(req: StepMove, ws: Workspace = Depends(get_workspace)):
	if not ws.is_editing:
		raise HTTPException(status_code=409, detail=NOT_EDITING)
	try:
		ws.move_step(req.index, req.direction)
	except KeyError:
		raise HTTPException(status_code=404, detail="표 형식 지도안이 없습니다.")
	return _state(ws)


@router.post("/edit/save")
async def save_edits(ws: Workspace = Depends(get_workspace)):
	if not ws.is_editing:
		raise HTTPException(status_code=409, detail=NOT_EDITING)
	try:
		ws.save_edits()
	except ValidationError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return _state(ws)


@router.post("/edit/cancel")
async def cancel_edit(ws: Workspace = Depends(get_workspace)):
	ws.cancel_edit()
	return _state(ws)


@router.post("/current/worksheet/image")
async def attach_activity_image(req: ActivityImage, ws: Workspace = Depends(get_workspace)):
	if not req.image.startswith("data:image/"):
		raise HTTPException(status_code=400, detail="image must be a data URL")
	try:
		ws.set_activity_image(req.path, req.image)
	except LookupError as e:
		# KeyError / IndexError are LookupErrors too: bad paths
		if ws.current is None:
			raise HTTPException(status_code=404, detail=NO_ACTIVE_PLAN)
		raise HTTPException(status_code=400, detail=f"invalid activity path {req.path}: {e}")
	return _state(ws)


@router.post("/current/{kind}")
async def generate_sibling(kind: str, ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	if kind not in SIBLING_FIELDS:
		raise HTTPException(status_code=404, detail=f"unknown document kind: {kind}")
	if ws.current is None:
		raise HTTPException(status_code=404, detail=NO_ACTIVE_PLAN)
	if ws.is_editing:
		raise HTTPException(status_code=409, detail=EDITING)
	try:
		await ws.generate_sibling(client, kind)
	except MissingPrerequisiteError as e:
		raise HTTPException(status_code=409, detail=e.message)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	return _state(ws)


@router.post("/{plan_id:path}/select")
async def select_plan(plan_id: str, ws: Workspace = Depends(get_workspace)):
	if ws.select(plan_id) is None:
		raise HTTPException(status_code=404, detail="저장된 지도안을 찾을 수 없습니다.")
	return _state(ws)


@router.delete("/{plan_id:path}")
async def delete_plan(plan_id: str, ws: Workspace = Depends(get_workspace)):
	ws.delete(plan_id)
	logger.info("Workspace %s deleted plan %s", ws.workspace_id, plan_id)
	return _state(ws)
