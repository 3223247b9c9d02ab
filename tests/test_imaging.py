import pytest

from udl_planner import imaging
from udl_planner.errors import ImageGenerationError


@pytest.mark.anyio
async def test_retries_once_then_succeeds(fake_client):
	fake_client.predict_image.side_effect = [RuntimeError("busy"), "QUJD"]

	image = await imaging.generate_activity_image(fake_client, "그림 보기", "증발, 응결", "water cycle", max_retries=1, delay_seconds=0)

	assert image == "data:image/png;base64,QUJD"
	assert fake_client.predict_image.await_count == 2
	prompt = fake_client.predict_image.await_args.args[0]
	assert "water cycle" in prompt
	assert "NO TEXT" in prompt


@pytest.mark.anyio
async def test_gives_up_after_the_retry(fake_client):
	fake_client.predict_image.side_effect = RuntimeError("quota exceeded")

	with pytest.raises(ImageGenerationError, match="quota exceeded"):
		await imaging.generate_activity_image(fake_client, "t", "c", max_retries=1, delay_seconds=0)
	assert fake_client.predict_image.await_count == 2


@pytest.mark.anyio
async def test_waits_between_attempts(fake_client, monkeypatch):
	delays = []

	async def fake_sleep(seconds):
		delays.append(seconds)

	monkeypatch.setattr(imaging.asyncio, "sleep", fake_sleep)
	fake_client.predict_image.side_effect = RuntimeError("busy")

	with pytest.raises(ImageGenerationError):
		await imaging.generate_activity_image(fake_client, "t", "c", max_retries=1, delay_seconds=2.0)
	assert delays == [2.0]
