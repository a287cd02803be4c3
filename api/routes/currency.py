from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_preference_service,
)
from api.schemas import (
	ConversionResponse,
	CurrencyInfoResponse,
	FormattedPriceResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService, PreferenceService

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyPath = Annotated[str, Path(min_length=3, max_length=5)]
AmountPath = Annotated[Decimal, Path(ge=0)]


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = service.get_supported_currencies()
	return SupportedCurrenciesResponse(
		currencies=[
			CurrencyInfoResponse(code=c.code, name=c.name, symbol=c.symbol, rate=c.rate)
			for c in currencies
		]
	)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyPath,
	to_currency: CurrencyPath,
	amount: AmountPath,
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()
	currency_service.validate_currency(from_currency)
	currency_service.validate_currency(to_currency)

	result = service.describe_conversion(amount, from_currency, to_currency)
	return ConversionResponse(**result)


@router.get(
	'/format/{currency}/{amount}',
	response_model=FormattedPriceResponse,
	status_code=status.HTTP_200_OK,
	summary='Format an amount in a currency',
)
async def format_amount(
	currency: CurrencyPath,
	amount: AmountPath,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	show_symbol: bool = True,
) -> FormattedPriceResponse:
	currency = currency.upper()
	return FormattedPriceResponse(
		amount=amount,
		currency=currency,
		formatted=service.format(amount, currency, show_symbol),
	)


@router.get(
	'/price/{amount}',
	response_model=FormattedPriceResponse,
	status_code=status.HTTP_200_OK,
	summary='Display a price in the viewer currency',
)
async def display_price(
	amount: AmountPath,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	preferences: Annotated[PreferenceService, Depends(get_preference_service)],
	from_currency: Annotated[str, Query(min_length=3, max_length=5)] = 'USD',
	show_symbol: bool = True,
	currency: Annotated[str | None, Query(min_length=3, max_length=5)] = None,
	user_id: str | None = None,
) -> FormattedPriceResponse:
	from_currency = from_currency.upper()
	display_currency = await preferences.resolve_display_currency(user_id=user_id, currency=currency)

	converted = service.convert(amount, from_currency, display_currency)
	return FormattedPriceResponse(
		amount=converted,
		currency=display_currency,
		formatted=service.format(converted, display_currency, show_symbol),
	)
