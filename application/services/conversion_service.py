from decimal import Decimal

from application.services.currency_service import CurrencyService
from domain.models.currency import normalize_amount
from domain.pricing import convert, format_amount

RATE_PRECISION = Decimal('0.000001')


class ConversionService:
	def __init__(self, currency_service: CurrencyService):
		self.currency_service = currency_service

	def convert(self, amount, from_currency: str, to_currency: str) -> Decimal:
		self.currency_service.check_currency(from_currency)
		self.currency_service.check_currency(to_currency)
		return convert(amount, from_currency, to_currency, self.currency_service.rates)

	def format(self, amount, currency: str, show_symbol: bool = True) -> str:
		self.currency_service.check_currency(currency)
		return format_amount(amount, currency, self.currency_service.formats, show_symbol)

	def format_price(
		self, amount, from_currency: str, display_currency: str, show_symbol: bool = True
	) -> str:
		converted = self.convert(amount, from_currency, display_currency)
		return self.format(converted, display_currency, show_symbol)

	def describe_conversion(self, amount, from_currency: str, to_currency: str) -> dict:
		original = normalize_amount(amount)
		converted = self.convert(original, from_currency, to_currency)

		rates = self.currency_service.rates
		from_rate = rates.get(from_currency) or Decimal('1')
		to_rate = rates.get(to_currency) or Decimal('1')

		return {
			'from_currency': from_currency,
			'to_currency': to_currency,
			'original_amount': original,
			'converted_amount': converted,
			'exchange_rate': (to_rate / from_rate).quantize(RATE_PRECISION),
			'formatted': self.format(converted, to_currency),
		}
