import logging
from datetime import datetime

from redis.exceptions import RedisError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from domain.exceptions.currency import CacheError
from domain.models.currency import UserPreference
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.persistence.models.preference import UserProfileDB

logger = logging.getLogger(__name__)


class PreferenceRepository:
	"""User display currencies, read cache-aside; the database is authoritative."""

	def __init__(self, db_session: AsyncSession, cache_service: RedisCacheService):
		self.db_session = db_session
		self.cache = cache_service

	async def get_preference(self, user_id: str) -> UserPreference | None:
		try:
			cached = await self.cache.get_preference(user_id)
		except CacheError as e:
			logger.warning(f'Ignoring cached preference for {user_id}: {e}')
			cached = None
		except RedisError as e:
			logger.error(f'Preference cache unavailable, reading {user_id} from database: {e}')
			cached = None
		if cached:
			return cached

		result = await self.db_session.execute(
			select(UserProfileDB).filter(UserProfileDB.user_id == user_id)
		)
		profile = result.scalars().first()
		if profile is None:
			return None

		preference = UserPreference(
			user_id=profile.user_id,
			preferred_currency=profile.preferred_currency,
			updated_at=profile.updated_at,
		)
		await self._cache_preference(preference)
		return preference

	async def save_preference(self, user_id: str, currency: str) -> UserPreference:
		now = datetime.now()
		profile = await self.db_session.get(UserProfileDB, user_id)
		if profile is None:
			self.db_session.add(
				UserProfileDB(user_id=user_id, preferred_currency=currency, updated_at=now)
			)
		else:
			profile.preferred_currency = currency
			profile.updated_at = now

		try:
			await self.db_session.commit()
		except Exception:
			await self.db_session.rollback()
			raise

		preference = UserPreference(user_id=user_id, preferred_currency=currency, updated_at=now)
		await self._cache_preference(preference)
		return preference

	async def _cache_preference(self, preference: UserPreference) -> None:
		try:
			await self.cache.set_preference(preference)
		except RedisError as e:
			logger.error(f'Failed to cache preference for {preference.user_id}: {e}')
