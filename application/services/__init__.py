from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .preference_service import PreferenceService
from .price_binding import DisplayPreference, FormattedPrice

__all__ = [
	'ConversionService',
	'CurrencyService',
	'DisplayPreference',
	'FormattedPrice',
	'PreferenceService',
]
