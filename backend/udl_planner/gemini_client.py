from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .settings import settings

logger = logging.getLogger(__name__)


class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		image_model: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.gemini_api_key
		if not self.api_key:
			raise ValueError("GEMINI_API_KEY is not configured")
		self.model = model or settings.gemini_model
		self.image_model = image_model or settings.gemini_image_model
		self.provider = settings.gemini_provider
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.models_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.models_url = base_url or "https://generativelanguage.googleapis.com/v1beta/models"
			self._auth_in_query = True
		self._client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds, transport=transport)

	@property
	def generate_url(self) -> str:
		return f"{self.models_url}/{self.model}:generateContent"

	@property
	def predict_url(self) -> str:
		return f"{self.models_url}/{self.image_model}:predict"

	async def generate(self, prompt: str, *, response_schema: Optional[Dict[str, Any]] = None) -> str:
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		if response_schema is not None:
			payload["generationConfig"] = {
				"responseMimeType": "application/json",
				"responseSchema": response_schema,
			}
		r = await self._post(self.generate_url, payload)
		try:
			data = r.json()
			return data["candidates"][0]["content"]["parts"][0]["text"]
		except Exception as err:
			raise RuntimeError(f"Unexpected Gemini response: {r.text[:500]}") from err

	async def predict_image(self, prompt: str, *, negative_prompt: Optional[str] = None) -> str:
		parameters: Dict[str, Any] = {"sampleCount": 1}
		if negative_prompt:
			parameters["negativePrompt"] = negative_prompt
		payload: Dict[str, Any] = {"instances": [{"prompt": prompt}], "parameters": parameters}
		r = await self._post(self.predict_url, payload)
		try:
			data = r.json()
		except Exception as err:
			raise RuntimeError(f"Unexpected Imagen response: {r.text[:500]}") from err
		predictions = data.get("predictions") or []
		encoded = predictions[0].get("bytesBase64Encoded") if predictions else None
		if not encoded:
			raise RuntimeError("No image data in response")
		return encoded

	async def _post(self, url: str, payload: Dict[str, Any]) -> httpx.Response:
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		r = await self._client.post(url, params=params, headers=headers, json=payload)
		if r.is_error:
			message = r.reason_phrase
			try:
				message = r.json().get("error", {}).get("message") or message
			except Exception:
				pass
			logger.warning("Gemini call to %s failed with %s: %s", url.rsplit("/", 1)[-1], r.status_code, message)
			r.raise_for_status()
		return r

	async def aclose(self) -> None:
		await self._client.aclose()
