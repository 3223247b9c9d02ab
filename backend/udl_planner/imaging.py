from __future__ import annotations
import asyncio
import logging
from typing import Optional

from .errors import ImageGenerationError
from .gemini_client import GeminiClient
from .prompts import IMAGE_NEGATIVE_PROMPT, build_image_prompt
from .settings import settings

logger = logging.getLogger(__name__)


async def generate_activity_image(
	client: GeminiClient,
	activity_title: str,
	activity_content: str,
	image_prompt: Optional[str] = None,
	*,
	max_retries: Optional[int] = None,
	delay_seconds: Optional[float] = None,
) -> str:
	"""Return a PNG data URL for a worksheet activity illustration."""
	retries = settings.image_max_retries if max_retries is None else max_retries
	delay = settings.image_retry_delay_seconds if delay_seconds is None else delay_seconds
	prompt = build_image_prompt(activity_title, activity_content, image_prompt)
	last_error: Optional[Exception] = None
	for attempt in range(retries + 1):
		try:
			logger.info("Image generation attempt %d for %r", attempt + 1, activity_title)
			encoded = await client.predict_image(prompt, negative_prompt=IMAGE_NEGATIVE_PROMPT)
			return f"data:image/png;base64,{encoded}"
		except Exception as err:
			logger.warning("Image generation attempt %d failed: %s", attempt + 1, err)
			last_error = err
			if attempt < retries:
				await asyncio.sleep(delay)
	raise ImageGenerationError(str(last_error) if last_error else "Image generation failed") from last_error
