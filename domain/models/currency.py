import math
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from domain.exceptions.currency import RateTableError

BASE_CURRENCY = "USD"
ZERO = Decimal("0")


def normalize_amount(value) -> Decimal:
    """Coerce a raw amount to a finite Decimal; anything else becomes zero."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else ZERO
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ZERO
    return amount if amount.is_finite() else ZERO


class SymbolPosition(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class CurrencyFormat:
    code: str
    name: str
    symbol: str
    position: SymbolPosition = SymbolPosition.PREFIX
    spaced: bool = False  # space between symbol and number
    decimal_separator: str = "."
    group_separator: str = ","


@dataclass(frozen=True)
class ExchangeRateTable:
    """Units of each currency equal to one unit of the base currency (USD).

    Built once from configuration and never mutated afterwards.
    """

    rates: Mapping[str, Decimal]
    base_currency: str = BASE_CURRENCY

    def __post_init__(self):
        validated = {}
        for code, raw in self.rates.items():
            rate = normalize_amount(raw)
            if rate <= 0:
                raise RateTableError(f"Rate for {code} must be a positive finite number, got {raw!r}")
            validated[code.upper()] = rate

        base = validated.get(self.base_currency)
        if base is not None and base != 1:
            raise RateTableError(
                f"Base currency {self.base_currency} must have rate 1, got {base}"
            )
        object.__setattr__(self, "rates", MappingProxyType(validated))

    def __contains__(self, code: str) -> bool:
        return code in self.rates

    def get(self, code: str) -> Decimal | None:
        return self.rates.get(code)

    @property
    def codes(self) -> list[str]:
        return list(self.rates)


@dataclass(frozen=True)
class FormatTable:
    formats: Mapping[str, CurrencyFormat]

    def __post_init__(self):
        object.__setattr__(
            self, "formats", MappingProxyType({code.upper(): f for code, f in self.formats.items()})
        )

    def __contains__(self, code: str) -> bool:
        return code in self.formats

    def get(self, code: str) -> CurrencyFormat:
        """Format entry for ``code``; unknown codes get the raw code as a spaced prefix."""
        fmt = self.formats.get(code)
        if fmt is None:
            return CurrencyFormat(code=code, name=code, symbol=code, spaced=True)
        return fmt

    @property
    def codes(self) -> list[str]:
        return list(self.formats)


@dataclass(frozen=True)
class MonetaryAmount:
    value: Decimal
    currency: str

    def __post_init__(self):
        object.__setattr__(self, "value", normalize_amount(self.value))
        object.__setattr__(self, "currency", self.currency.upper())


@dataclass(frozen=True)
class SupportedCurrency:
    code: str
    name: str
    symbol: str
    rate: Decimal


@dataclass(frozen=True)
class UserPreference:
    user_id: str
    preferred_currency: str
    updated_at: datetime | None = field(default=None, compare=False)
