import logging
from typing import AsyncIterator, Optional

from fastapi import HTTPException, Request

from ..gemini_client import GeminiClient
from ..settings import settings
from ..workspace import Workspace, new_workspace_id, workspace_for

logger = logging.getLogger(__name__)

API_KEY_MISSING = "서버에 Gemini API 키가 설정되지 않았습니다."


async def workspace_cookie(request: Request, call_next):
	"""HTTP middleware: pick the caller's workspace id and issue the cookie on any response, errors included."""
	workspace_id = request.cookies.get(settings.workspace_cookie)
	issued = not workspace_id
	if issued:
		workspace_id = new_workspace_id()
		logger.info("Issued workspace %s", workspace_id)
	request.state.workspace_id = workspace_id
	response = await call_next(request)
	if issued:
		response.set_cookie(settings.workspace_cookie, workspace_id, httponly=True, samesite="lax")
	return response


def get_workspace(request: Request) -> Workspace:
	return workspace_for(request.state.workspace_id)


async def get_client() -> AsyncIterator[GeminiClient]:
	try:
		client = GeminiClient()
	except ValueError as e:
		raise HTTPException(status_code=503, detail=API_KEY_MISSING) from e
	try:
		yield client
	finally:
		await client.aclose()


async def get_optional_client() -> AsyncIterator[Optional[GeminiClient]]:
	"""Like get_client, but yields None so the caller can shape its own error body."""
	try:
		client = GeminiClient()
	except ValueError:
		yield None
		return
	try:
		yield client
	finally:
		await client.aclose()
