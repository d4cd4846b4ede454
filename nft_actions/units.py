"""SOL/lamport conversion and display formatting."""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import Union

LAMPORTS_PER_SOL = 1_000_000_000
CURRENCY_SYMBOL = "SOL"

_DEFAULT_FRACTION_DIGITS = 4
_SIGNIFICANT_DIGITS_FOR_DUST = 2

Number = Union[int, float, str, Decimal]


def lamports_to_sol(lamports: int) -> Decimal:
    value = Decimal(int(lamports))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 1)
        return value / Decimal(LAMPORTS_PER_SOL)


def sol_to_lamports(amount: Number) -> int:
    value = Decimal(str(amount)) * LAMPORTS_PER_SOL
    return int(value.to_integral_value(rounding=ROUND_DOWN))


def format_token_amount(amount: Number, max_fraction_digits: int = _DEFAULT_FRACTION_DIGITS) -> str:
    """Render a token amount for display.

    Amounts are rounded half-up to ``max_fraction_digits`` places, grouped by
    thousands, and stripped of trailing zeros. Non-zero amounts too small to
    survive that rounding keep two significant digits instead of collapsing
    to ``"0"``.
    """
    value = Decimal(str(amount))
    if value == 0:
        return "0"

    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, value.adjusted() + max_fraction_digits + 2)
        rounded = value.quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP)
        if rounded == 0:
            exponent = value.adjusted() - (_SIGNIFICANT_DIGITS_FOR_DUST - 1)
            rounded = value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)

    text = format(rounded, ",f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_sol_price(lamports: int) -> str:
    return f"{format_token_amount(lamports_to_sol(lamports))} {CURRENCY_SYMBOL}"
