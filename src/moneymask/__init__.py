"""
moneymask — Currency masks for interactive text inputs.

Formats amounts with grouping, decimal separator and symbols, reads them
back, and keeps the edit cursor on the digit being typed:
Host edit → Digits → Value → Masked text + cursor → Host.
"""

__version__ = "0.1.0"

from .config import CursorBehavior, FormatConfig
from .controller import MoneyMaskedTextController
from .cursor import CursorState, resolve_cursor
from .errors import ConfigurationError, MoneyMaskError, UnsupportedValueError
from .money import (
    MAX_INTEGER_DIGITS,
    exceeds_magnitude,
    extract_digits,
    format_value,
    strip_decoration,
    unmask,
)

__all__ = [
    "FormatConfig", "CursorBehavior", "MoneyMaskedTextController",
    "CursorState", "resolve_cursor",
    "MoneyMaskError", "ConfigurationError", "UnsupportedValueError",
    "MAX_INTEGER_DIGITS", "extract_digits", "format_value", "exceeds_magnitude",
    "unmask", "strip_decoration",
]
