from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from ..workspace import Workspace
from .deps import get_workspace

router = APIRouter(prefix="/inputs", tags=["inputs"])


class InputUpdate(BaseModel):
	name: str
	value: str


class StandardToggle(BaseModel):
	standard: str


class ObjectiveChoice(BaseModel):
	objective: str


@router.get("")
async def read_inputs(ws: Workspace = Depends(get_workspace)):
	return ws.inputs.to_json_dict()


@router.patch("")
async def update_input(req: InputUpdate, ws: Workspace = Depends(get_workspace)):
	try:
		ws.update_input(req.name, req.value)
	except KeyError:
		raise HTTPException(status_code=400, detail=f"unknown input: {req.name}")
	except ValidationError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return ws.inputs.to_json_dict()


@router.post("/standards/toggle")
async def toggle_standard(req: StandardToggle, ws: Workspace = Depends(get_workspace)):
	ws.toggle_standard(req.standard)
	return {"achievementStandards": ws.inputs.achievement_standards}


@router.post("/objective")
async def select_objective(req: ObjectiveChoice, ws: Workspace = Depends(get_workspace)):
	ws.select_objective(req.objective)
	return {"objectives": ws.inputs.objectives}
