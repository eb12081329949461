from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Upstream
	FRANK_API_URL: str = 'https://api.frankfurter.dev/v1'
	REQUEST_TIMEOUT_SECONDS: float = Field(default=10, gt=0)
	RETRY_ATTEMPTS: int = Field(default=3, ge=1)
	RETRY_BACKOFF: float = Field(default=0.5, ge=0)

	CACHE_TTL_SECONDS: int = Field(default=60, ge=0)
	FALLBACK_FILE: str = 'data/sample_sk.json'

	FROM_CURRENCY: str = 'EUR'
	TO_CURRENCY: str = 'USD'

	# Application
	APP_NAME: str = 'Exchange Rate Summary API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
