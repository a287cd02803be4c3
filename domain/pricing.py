"""Pure conversion and formatting of prices.

Both functions take their lookup tables as arguments and never raise for bad
amounts or unknown currency codes: a price label must always render.
"""
from decimal import ROUND_HALF_UP, Decimal, localcontext

from domain.models.currency import (
    ExchangeRateTable,
    FormatTable,
    SymbolPosition,
    normalize_amount,
)

CENT = Decimal("0.01")
NEUTRAL_RATE = Decimal("1")


def round_money(value: Decimal) -> Decimal:
    # quantize needs every integer digit plus two decimals to fit in the precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        # ROUND_HALF_UP rounds half away from zero
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def convert(amount, from_currency: str, to_currency: str, rates: ExchangeRateTable) -> Decimal:
    """Convert ``amount`` between currencies through the base currency.

    The result is always a Decimal: floats come back as ``Decimal(str(amount))``,
    so ``convert(0.1, "USD", "USD")`` is ``Decimal("0.1")``, not ``0.1``.
    """
    amount = normalize_amount(amount)
    if from_currency == to_currency:
        return amount

    usd_amount = amount / (rates.get(from_currency) or NEUTRAL_RATE)
    return round_money(usd_amount * (rates.get(to_currency) or NEUTRAL_RATE))


def format_amount(amount, currency: str, formats: FormatTable, show_symbol: bool = True) -> str:
    fmt = formats.get(currency)
    value = round_money(normalize_amount(amount))

    sign = "-" if value < 0 else ""
    # ',.2f' grouping is locale independent, unlike the 'n' presentation type
    number = format(abs(value), ",.2f")
    if (fmt.group_separator, fmt.decimal_separator) != (",", "."):
        number = number.translate(
            str.maketrans({",": fmt.group_separator, ".": fmt.decimal_separator})
        )

    if not show_symbol:
        return f"{sign}{number}"

    gap = " " if fmt.spaced else ""
    if fmt.position is SymbolPosition.SUFFIX:
        return f"{sign}{number}{gap}{fmt.symbol}"
    return f"{sign}{fmt.symbol}{gap}{number}"
