import logging
from collections.abc import AsyncGenerator
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from application.services import ConversionService, CurrencyService, PreferenceService
from config.currencies import build_format_table, build_rate_table
from config.settings import get_settings
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.preference import PreferenceRepository

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None
	currency_service: CurrencyService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.db = Database.from_settings(settings)
	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.redis_cache = RedisCacheService(
		deps.redis_client,
		preference_ttl=timedelta(seconds=settings.PREFERENCE_CACHE_TTL_SECONDS),
	)

	rates = build_rate_table(settings)
	deps.currency_service = CurrencyService(
		rates=rates,
		formats=build_format_table(),
		strict=settings.STRICT_CURRENCY_LOOKUP,
	)
	logger.info(f'Dependencies initialized with {len(rates.codes)} currencies')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db:
		await deps.db.close()

	logger.info('Cleanup complete')


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
	if deps.db is None:
		raise RuntimeError('Database is not initialized')

	# Repositories commit their own writes; anything left open is discarded.
	async with deps.db.session_factory() as session:
		try:
			yield session
		except Exception:
			await session.rollback()
			raise


def get_redis_cache() -> RedisCacheService:
	if deps.redis_cache is None:
		raise RuntimeError('Redis cache not initialized')
	return deps.redis_cache


def get_currency_service() -> CurrencyService:
	if deps.currency_service is None:
		raise RuntimeError('Currency service not initialized')
	return deps.currency_service


def get_conversion_service(
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(currency_service=currency_service)


async def get_preference_repository(
	session: Annotated[AsyncSession, Depends(get_db_session)],
	cache: Annotated[RedisCacheService, Depends(get_redis_cache)],
) -> PreferenceRepository:
	return PreferenceRepository(db_session=session, cache_service=cache)


async def get_preference_service(
	repository: Annotated[PreferenceRepository, Depends(get_preference_repository)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> PreferenceService:
	return PreferenceService(
		repository=repository,
		currency_service=currency_service,
		default_currency=get_settings().DEFAULT_CURRENCY,
	)
