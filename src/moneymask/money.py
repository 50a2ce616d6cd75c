"""Fixed-point money masking: digit extraction, formatting and unmasking."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .config import FormatConfig
from .errors import UnsupportedValueError


MAX_INTEGER_DIGITS = 12

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def extract_digits(text: str) -> str:
    """Return only the ASCII digits of ``text``, in order."""
    return _NON_DIGIT_RE.sub("", text)


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a caller-supplied amount to a finite, non-negative Decimal."""
    if isinstance(value, Decimal):
        dec = value
    else:
        try:
            dec = Decimal(str(value))
        except InvalidOperation:
            raise UnsupportedValueError(value, "not a number") from None
    if not dec.is_finite():
        raise UnsupportedValueError(value, "must be finite")
    if dec < 0:
        raise UnsupportedValueError(value, "negative amounts are not supported")
    return dec


def exceeds_magnitude(value: Decimal | float | int | str) -> bool:
    """True when the rounded integer part has more than MAX_INTEGER_DIGITS digits."""
    whole = to_decimal(value).to_integral_value(rounding=ROUND_HALF_UP)
    return len(str(int(whole))) > MAX_INTEGER_DIGITS


def format_value(value: Decimal | float | int | str, config: FormatConfig) -> str:
    """
    Render ``value`` as a masked string.

    The amount is rounded half-up to ``config.precision`` places, the integer
    part is grouped in threes with ``thousand_separator`` and the fraction is
    joined with ``decimal_separator`` (omitted when precision is 0). Symbols
    wrap the result.
    """
    dec = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, dec.adjusted() + config.precision + 2)
        fixed = dec.quantize(Decimal(1).scaleb(-config.precision), rounding=ROUND_HALF_UP)

    integer, _, fraction = f"{fixed:f}".partition(".")
    masked = f"{int(integer):,}".replace(",", config.thousand_separator)
    if config.precision:
        masked += config.decimal_separator + fraction

    if config.right_symbol:
        masked += config.right_symbol
    if config.left_symbol:
        masked = config.left_symbol + masked
    return masked


def digits_to_value(digits: str, precision: int) -> Decimal:
    """Read a bare digit run as a fixed-point amount with ``precision`` decimals."""
    if not digits:
        return Decimal(0)
    # keep at least one integer digit
    padded = digits.zfill(precision + 1)
    if precision:
        padded = f"{padded[:-precision]}.{padded[-precision:]}"
    return Decimal(padded)


def unmask(masked: str, config: FormatConfig) -> Decimal:
    """
    Recover the numeric value of a masked string. No digits means zero.

    The symbols are removed first, so a left symbol such as ``"A1 "`` does
    not leak its digits into the amount.
    """
    digits = extract_digits(strip_decoration(masked, config))
    return digits_to_value(digits, config.precision)


def _remove_prefix(text: str, prefix: str) -> str:
    for candidate in (text, text.lstrip()):
        if candidate.startswith(prefix):
            return candidate[len(prefix):]
    return text


def _remove_suffix(text: str, suffix: str) -> str:
    for candidate in (text, text.rstrip()):
        if candidate.endswith(suffix):
            return candidate[: -len(suffix)]
    return text


def strip_decoration(masked: str, config: FormatConfig) -> str:
    """Remove one leading left symbol and one trailing right symbol."""
    text = masked
    if config.left_symbol:
        text = _remove_prefix(text, config.left_symbol)
    if config.right_symbol:
        text = _remove_suffix(text, config.right_symbol)
    return text.strip()
