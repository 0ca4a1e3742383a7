"""Helpers for Decimal normalization and cents conversion."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

AMOUNT_QUANTUM = Decimal("0.01")
ZERO_AMOUNT = Decimal("0.00")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value. None coerces to zero.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_amount(value: Decimal) -> Decimal:
    """Round a Decimal to currency precision (two places)."""
    return value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def parse_amount(raw) -> Decimal:
    """Parse a wire amount (number or numeric string) into a Decimal.

    Args:
        raw: Amount as int, Decimal, float or string.

    Returns:
        Decimal: Parsed amount quantized to two places.

    Raises:
        ValueError: If the value is empty, not numeric, not finite, or
            carries more than two decimal places.
    """
    if raw is None or isinstance(raw, bool):
        raise ValueError("Amount is required.")
    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not text:
        raise ValueError("Amount is required.")
    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"Amount is not a number: {raw!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Amount is not a finite number: {raw!r}")
    try:
        quantized = quantize_amount(amount)
    except InvalidOperation as exc:
        raise ValueError(f"Amount is out of range: {raw!r}") from exc
    if amount != quantized:
        raise ValueError("Amount must have at most two decimal places.")
    return quantized


def to_cents(amount: Decimal) -> int:
    """Convert a currency Decimal into integer cents."""
    return int(quantize_amount(amount) * 100)


def from_cents(cents) -> Decimal:
    """Convert integer cents (or None for an empty sum) into a Decimal."""
    return quantize_amount(coerce_decimal(cents) / 100)


def format_amount(amount: Decimal) -> str:
    """Render an amount with fixed two-decimal precision."""
    return f"{quantize_amount(amount):.2f}"


__all__ = [
    "AMOUNT_QUANTUM",
    "ZERO_AMOUNT",
    "coerce_decimal",
    "quantize_amount",
    "parse_amount",
    "to_cents",
    "from_cents",
    "format_amount",
]
