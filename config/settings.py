from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	DATABASE_URL: str = 'sqlite+aiosqlite:///./price_normalizer.db'

	REDIS_URL: str = 'redis://localhost:6379'

	# Currency
	DEFAULT_CURRENCY: str = 'USD'
	STRICT_CURRENCY_LOOKUP: bool = False
	EXCHANGE_RATES: dict[str, Decimal] = {}
	PREFERENCE_CACHE_TTL_SECONDS: int = 24 * 60 * 60

	# Application
	APP_NAME: str = 'Price Normalizer API'
	DEBUG: bool = True

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
