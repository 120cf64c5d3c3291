from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Shared secret the analysis engine sends in X-Webhook-Secret; unset disables the check
	webhook_secret: str | None = Field(default=None, validation_alias="CEFR_WEBHOOK_SECRET")
	log_level: str = Field(default="INFO", validation_alias="CEFR_LOG_LEVEL")

	# Violation values longer than this are truncated in failure results
	max_value_chars: int = Field(default=120, ge=8, validation_alias="CEFR_MAX_VALUE_CHARS")
	# Allowed drift (in score points) before the consistency pass warns
	score_tolerance: float = Field(default=1.0, ge=0, validation_alias="CEFR_SCORE_TOLERANCE")

	# Number of validated reports kept in memory by the webhook receiver
	report_store_size: int = Field(default=100, ge=1, validation_alias="CEFR_REPORT_STORE_SIZE")

	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=8000, validation_alias="PORT")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
