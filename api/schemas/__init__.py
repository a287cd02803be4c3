from .requests import PreferenceUpdateRequest
from .responses import (
	ConversionResponse,
	CurrencyInfoResponse,
	FormattedPriceResponse,
	PreferenceResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'CurrencyInfoResponse',
	'FormattedPriceResponse',
	'PreferenceResponse',
	'PreferenceUpdateRequest',
	'SupportedCurrenciesResponse',
]
