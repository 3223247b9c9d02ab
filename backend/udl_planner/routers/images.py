from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..errors import ImageGenerationError
from ..gemini_client import GeminiClient
from ..imaging import generate_activity_image
from .deps import API_KEY_MISSING, get_optional_client

router = APIRouter(prefix="/api", tags=["images"])

MISSING_FIELDS = "필수 정보가 누락되었습니다."


def _text(body: Any, key: str) -> Optional[str]:
	value = body.get(key) if isinstance(body, dict) else None
	return value if isinstance(value, str) and value.strip() else None


@router.post("/generate-image")
async def generate_image(request: Request, client: Optional[GeminiClient] = Depends(get_optional_client)):
	"""Illustrate a worksheet activity; every failure answers with an ``{"error": ...}`` body."""
	try:
		body = await request.json()
	except ValueError:
		body = None
	title = _text(body, "title")
	content = _text(body, "content")
	if title is None or content is None:
		return JSONResponse(status_code=400, content={"error": MISSING_FIELDS})
	if client is None:
		return JSONResponse(status_code=500, content={"error": API_KEY_MISSING})
	try:
		image = await generate_activity_image(client, title, content, _text(body, "imagePrompt"))
	except ImageGenerationError as e:
		return JSONResponse(status_code=500, content={"error": f"이미지 생성에 실패했습니다: {e}"})
	return {"image": image}


@router.api_route("/generate-image", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def generate_image_wrong_method():
	return JSONResponse(status_code=405, content={"error": "Method Not Allowed"}, headers={"Allow": "POST"})
