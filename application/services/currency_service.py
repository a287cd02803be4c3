import logging

from domain.exceptions.currency import InvalidCurrencyError
from domain.models.currency import ExchangeRateTable, FormatTable, SupportedCurrency

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, rates: ExchangeRateTable, formats: FormatTable, strict: bool = False):
		self.rates = rates
		self.formats = formats
		self.strict = strict
		self._reported: set[str] = set()

		missing = set(rates.codes) ^ set(formats.codes)
		if missing:
			logger.warning(f'Currencies without both a rate and a format entry: {sorted(missing)}')

	def get_supported_currencies(self) -> list[SupportedCurrency]:
		return [
			SupportedCurrency(
				code=code,
				name=self.formats.get(code).name,
				symbol=self.formats.get(code).symbol,
				rate=self.rates.get(code),
			)
			for code in self.rates.codes
			if code in self.formats
		]

	def is_supported(self, code: str) -> bool:
		return code in self.rates and code in self.formats

	def validate_currency(self, code: str) -> None:
		if not self.is_supported(code):
			raise InvalidCurrencyError(f'Currency {code} is not supported')

	def check_currency(self, code: str) -> bool:
		"""Report an unknown code without failing the caller, unless strict."""
		if self.is_supported(code):
			return True

		if self.strict:
			raise InvalidCurrencyError(f'Currency {code} is not supported')

		if code not in self._reported:
			self._reported.add(code)
			logger.warning(f'Unknown currency {code}: using neutral rate and raw code symbol')
		return False

	def get_symbol(self, code: str) -> str:
		return self.formats.get(code).symbol

	def get_name(self, code: str) -> str:
		return self.formats.get(code).name
