"""
Exact decimal helpers for currency math.

All money values are ``decimal.Decimal``. The working scale is passed
explicitly to each helper instead of living in a shared decimal context,
and each operation widens the context precision to fit its operands so
large amounts are never rounded.
"""

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext

from models.exceptions import ParseError

DEFAULT_SCALE = 4
DISPLAY_PLACES = 2
ZERO = Decimal("0")

DecimalLike = Decimal | int | float | str


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Convert a number or numeric string to ``Decimal`` without losing precision.

    Floats go through their shortest ``str()`` form, so ``32.95`` becomes
    ``Decimal("32.95")`` rather than its binary expansion.

    Raises:
        ParseError: if the value is not a finite decimal literal.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise ParseError(f"Not a decimal value: {value!r}")
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ParseError(f"Not a decimal literal: {value!r}") from e
    else:
        raise ParseError(f"Unsupported type for decimal value: {type(value).__name__}")

    if not result.is_finite():
        raise ParseError(f"Decimal value must be finite: {value!r}")
    return result


def _precision(*values: Decimal, scale: int = 0) -> int:
    """
    Significant digits needed to hold any sum or product of ``values``
    exactly, plus ``scale`` fractional digits for quantizing.
    """
    digits = 0
    for value in values:
        exponent = value.as_tuple().exponent
        digits += max(value.adjusted(), 0) + 1 + max(-exponent, 0)
    return digits + scale + 2


def truncate(value: DecimalLike, scale: int) -> Decimal:
    """Drop digits beyond ``scale`` fractional places (rounds toward zero)."""
    if scale < 0:
        raise ValueError(f"scale must be >= 0, got {scale}")
    value = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision(value, scale=scale))
        return value.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_DOWN)


def add(a: DecimalLike, b: DecimalLike, scale: int | None = None) -> Decimal:
    a, b = to_decimal(a), to_decimal(b)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision(a, b))
        result = a + b
    return result if scale is None else truncate(result, scale)


def multiply(a: DecimalLike, b: DecimalLike, scale: int | None = None) -> Decimal:
    a, b = to_decimal(a), to_decimal(b)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision(a, b))
        result = a * b
    return result if scale is None else truncate(result, scale)


def compare(a: DecimalLike, b: DecimalLike, scale: int | None = None) -> int:
    """
    Three-way compare: -1 if a < b, 0 if equal, 1 if a > b.

    When ``scale`` is given both operands are truncated to that many
    fractional digits first, so ``compare("54.375", "54.37", 2) == 0``.
    """
    left, right = to_decimal(a), to_decimal(b)
    if scale is not None:
        left, right = truncate(left, scale), truncate(right, scale)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def to_display(
    value: DecimalLike, places: int = DISPLAY_PLACES, rounding: str = ROUND_DOWN
) -> Decimal:
    """Quantize a value for display. Truncates to two places by default."""
    value = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision(value, scale=places))
        return value.quantize(Decimal(1).scaleb(-places), rounding=rounding)
