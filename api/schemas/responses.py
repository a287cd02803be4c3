from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CurrencyInfoResponse(BaseModel):
	code: str = Field(..., description='ISO 4217 currency code')
	name: str = Field(..., description='Display name')
	symbol: str = Field(..., description='Display symbol')
	rate: Decimal = Field(..., description='Units of this currency per 1 USD')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyInfoResponse] = Field(description='Supported currencies')


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount, rounded to cents')
	exchange_rate: Decimal = Field(..., description='Effective rate from source to target')
	formatted: str = Field(..., description='Converted amount formatted for display')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'original_amount': 100.00,
				'converted_amount': 92.00,
				'exchange_rate': 0.92,
				'formatted': '€92.00',
			}
		}
	)


class FormattedPriceResponse(BaseModel):
	amount: Decimal = Field(..., description='Amount in the display currency')
	currency: str = Field(..., description='Display currency code')
	formatted: str = Field(..., description='Display string')

	model_config = ConfigDict(
		json_schema_extra={'example': {'amount': 18.39, 'currency': 'EUR', 'formatted': '€18.39'}}
	)


class PreferenceResponse(BaseModel):
	user_id: str = Field(..., description='User identifier')
	currency: str = Field(..., description='Preferred display currency')
	updated_at: datetime | None = Field(default=None, description='When the preference last changed')
