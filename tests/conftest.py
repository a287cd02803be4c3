from decimal import Decimal

import pytest

from application.services import ConversionService, CurrencyService
from config.currencies import build_format_table
from domain.models.currency import ExchangeRateTable

TEST_RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "PLN": Decimal("4.02"),
    "JPY": Decimal("149.5"),
}


@pytest.fixture
def rate_table():
    return ExchangeRateTable(TEST_RATES)


@pytest.fixture
def format_table():
    return build_format_table()


@pytest.fixture
def currency_service(rate_table, format_table):
    return CurrencyService(rates=rate_table, formats=format_table)


@pytest.fixture
def conversion_service(currency_service):
    return ConversionService(currency_service=currency_service)
