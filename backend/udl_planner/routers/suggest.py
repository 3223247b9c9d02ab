from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..errors import GenerationError
from ..gemini_client import GeminiClient
from ..workspace import Workspace
from .deps import get_client, get_workspace

router = APIRouter(prefix="/suggest", tags=["suggestions"])


class ObjectiveOptionsRequest(BaseModel):
	topic: Optional[str] = None


@router.post("/topics")
async def suggest_topics(ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	try:
		topics = await ws.suggest_topics(client)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	return {"topics": topics}


@router.post("/standards")
async def suggest_standards(ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	try:
		standards = await ws.suggest_standards(client)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	return {"standards": standards}


@router.post("/objective")
async def suggest_objective(ws: Workspace = Depends(get_workspace), client: GeminiClient = Depends(get_client)):
	try:
		objective = await ws.suggest_objective(client)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	return {"objective": objective}


@router.post("/objectives")
async def suggest_objectives(
	req: Optional[ObjectiveOptionsRequest] = None,
	ws: Workspace = Depends(get_workspace),
	client: GeminiClient = Depends(get_client),
):
	"""Recommend objective options; passing a topic also makes it the form topic."""
	topic = req.topic if req else None
	try:
		options = await ws.suggest_objective_options(client, topic)
	except GenerationError as e:
		raise HTTPException(status_code=502, detail=e.message)
	return {"objectives": options, "topic": ws.inputs.topic}
