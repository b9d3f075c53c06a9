from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'USD Cost API'
	DISPLAY_ERROR_DETAILS: bool = False

	# Upstream rate source
	RATES_URL: str = 'https://www.cbr-xml-daily.ru/daily_json.js'
	HTTP_TIMEOUT: float = Field(default=3.14, gt=0)

	# Cache
	CACHE_TTL: int = Field(default=60, gt=0)
	CACHE_BACKEND: Literal['memory', 'redis'] = 'memory'
	REDIS_URL: str = 'redis://localhost:6379'
	REDIS_CACHE_KEY: str = 'rates:snapshot'

	# Logging
	LOG_PATH: str = 'logs/app.log'
	LOG_LEVEL: str = 'DEBUG'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
