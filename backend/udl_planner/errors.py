from __future__ import annotations


class GenerationError(RuntimeError):
	"""AI generation failed; the message is shown to the teacher as-is."""

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class ImageGenerationError(RuntimeError):
	pass


class MissingPrerequisiteError(GenerationError):
	"""A document that this generation builds on has not been generated yet."""


class PlanBusyError(RuntimeError):
	"""The active plan is being replaced by a pending request."""


# Shown for failures no handler anticipated
UNEXPECTED_ERROR = "예상치 못한 오류가 발생했습니다. 콘솔을 확인하고 다시 시도해 주세요."
