import logging

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from application.services.currency_service import CurrencyService
from domain.exceptions.currency import PreferenceStoreError
from domain.models.currency import UserPreference
from infrastructure.persistence.repositories.preference import PreferenceRepository

logger = logging.getLogger(__name__)


class PreferenceService:
	def __init__(
		self,
		repository: PreferenceRepository,
		currency_service: CurrencyService,
		default_currency: str = 'USD',
	):
		self.repository = repository
		self.currency_service = currency_service
		self.default_currency = default_currency

	async def get_preferred_currency(self, user_id: str) -> str:
		"""Stored display currency for a user, or the default when unavailable."""
		try:
			preference = await self.repository.get_preference(user_id)
		except (SQLAlchemyError, RedisError) as e:
			logger.error(f'Failed to load preferred currency for {user_id}: {e}')
			return self.default_currency

		if preference is None:
			return self.default_currency

		if not self.currency_service.is_supported(preference.preferred_currency):
			logger.warning(
				f'User {user_id} prefers unsupported currency {preference.preferred_currency}'
			)
			return self.default_currency

		return preference.preferred_currency

	async def set_preferred_currency(self, user_id: str, currency: str) -> UserPreference:
		currency = currency.upper()
		self.currency_service.validate_currency(currency)

		try:
			preference = await self.repository.save_preference(user_id, currency)
		except (SQLAlchemyError, RedisError) as e:
			logger.error(f'Failed to save preferred currency for {user_id}: {e}')
			raise PreferenceStoreError(f'Could not store preference for {user_id}') from e

		logger.info(f'User {user_id} now displays prices in {currency}')
		return preference

	async def resolve_display_currency(
		self, user_id: str | None = None, currency: str | None = None
	) -> str:
		if currency:
			return currency.upper()
		if user_id:
			return await self.get_preferred_currency(user_id)
		return self.default_currency
