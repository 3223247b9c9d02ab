import json

import httpx
import pytest

from udl_planner.gemini_client import GeminiClient
from udl_planner.settings import settings


def _client(handler, **kwargs):
	return GeminiClient(api_key="test-key", model="gemini-test", image_model="imagen-test", transport=httpx.MockTransport(handler), **kwargs)


def test_missing_api_key_is_rejected(monkeypatch):
	monkeypatch.setattr(settings, "gemini_api_key", None)
	with pytest.raises(ValueError):
		GeminiClient()


@pytest.mark.anyio
async def test_generate_posts_schema_and_returns_text():
	seen = {}

	def handler(request):
		seen["url"] = request.url
		seen["body"] = json.loads(request.content)
		return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": '{"topics": []}'}]}}]})

	client = _client(handler)
	try:
		text = await client.generate("주제 추천", response_schema={"type": "OBJECT"})
	finally:
		await client.aclose()

	assert text == '{"topics": []}'
	assert seen["url"].path.endswith("/models/gemini-test:generateContent")
	assert seen["url"].params["key"] == "test-key"
	assert seen["body"]["generationConfig"] == {"responseMimeType": "application/json", "responseSchema": {"type": "OBJECT"}}
	assert seen["body"]["contents"][0]["parts"][0]["text"] == "주제 추천"


@pytest.mark.anyio
async def test_unexpected_shape_raises():
	client = _client(lambda request: httpx.Response(200, json={"candidates": []}))
	try:
		with pytest.raises(RuntimeError):
			await client.generate("x")
	finally:
		await client.aclose()


@pytest.mark.anyio
async def test_http_errors_propagate():
	client = _client(lambda request: httpx.Response(429, json={"error": {"message": "quota"}}))
	try:
		with pytest.raises(httpx.HTTPStatusError):
			await client.generate("x")
	finally:
		await client.aclose()


@pytest.mark.anyio
async def test_predict_image_returns_base64_bytes():
	seen = {}

	def handler(request):
		seen["url"] = request.url
		seen["body"] = json.loads(request.content)
		return httpx.Response(200, json={"predictions": [{"bytesBase64Encoded": "iVBORw0KGgo="}]})

	client = _client(handler)
	try:
		encoded = await client.predict_image("a water cycle", negative_prompt="text")
	finally:
		await client.aclose()

	assert encoded == "iVBORw0KGgo="
	assert seen["url"].path.endswith("/models/imagen-test:predict")
	assert seen["body"]["parameters"] == {"sampleCount": 1, "negativePrompt": "text"}


@pytest.mark.anyio
async def test_predict_image_without_data_raises():
	client = _client(lambda request: httpx.Response(200, json={"predictions": []}))
	try:
		with pytest.raises(RuntimeError):
			await client.predict_image("x")
	finally:
		await client.aclose()
