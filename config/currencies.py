from decimal import Decimal

from config.settings import Settings
from domain.models.currency import (
	CurrencyFormat,
	ExchangeRateTable,
	FormatTable,
	SymbolPosition,
)

CURRENCY_FORMATS = {
	'USD': CurrencyFormat(code='USD', name='US Dollar', symbol='$'),
	'EUR': CurrencyFormat(code='EUR', name='Euro', symbol='€'),
	'GBP': CurrencyFormat(code='GBP', name='British Pound', symbol='£'),
	'PLN': CurrencyFormat(
		code='PLN',
		name='Polish Zloty',
		symbol='zł',
		position=SymbolPosition.SUFFIX,
		spaced=True,
	),
	'CAD': CurrencyFormat(code='CAD', name='Canadian Dollar', symbol='C$'),
	'AUD': CurrencyFormat(code='AUD', name='Australian Dollar', symbol='A$'),
	'JPY': CurrencyFormat(code='JPY', name='Japanese Yen', symbol='¥'),
	'CHF': CurrencyFormat(code='CHF', name='Swiss Franc', symbol='CHF'),
	'CNY': CurrencyFormat(code='CNY', name='Chinese Yuan', symbol='¥'),
}

# Units per 1 USD. Static; there is no live refresh.
EXCHANGE_RATES = {
	'USD': Decimal('1.0'),
	'EUR': Decimal('0.92'),
	'GBP': Decimal('0.79'),
	'PLN': Decimal('4.02'),
	'CAD': Decimal('1.35'),
	'AUD': Decimal('1.52'),
	'JPY': Decimal('149.5'),
	'CHF': Decimal('0.88'),
	'CNY': Decimal('7.24'),
}


def build_rate_table(settings: Settings) -> ExchangeRateTable:
	rates = dict(EXCHANGE_RATES)
	rates.update({code.upper(): rate for code, rate in settings.EXCHANGE_RATES.items()})
	return ExchangeRateTable(rates)


def build_format_table() -> FormatTable:
	return FormatTable(CURRENCY_FORMATS)
