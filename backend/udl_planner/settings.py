from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
	# Imagen model used by the worksheet illustration proxy
	gemini_image_model: str = Field(default="imagen-3.0-generate-002", validation_alias="GEMINI_IMAGE_MODEL")
	gemini_timeout_seconds: float = Field(default=60.0, validation_alias="GEMINI_TIMEOUT_SECONDS")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")

	# Image proxy retry policy (one retry after a fixed delay)
	image_max_retries: int = Field(default=1, validation_alias="IMAGE_MAX_RETRIES")
	image_retry_delay_seconds: float = Field(default=2.0, validation_alias="IMAGE_RETRY_DELAY_SECONDS")

	# Saved plans live under this key, one entry per browser workspace
	storage_key: str = Field(default="udl-saved-plans", validation_alias="STORAGE_KEY")
	workspace_cookie: str = Field(default="udl_workspace", validation_alias="WORKSPACE_COOKIE")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
