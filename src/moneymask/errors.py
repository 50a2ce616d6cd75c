"""
moneymask error types.

Only configuration problems and unsupported values are raised; magnitude
overflow and cursor recovery are handled in place by the controller.
"""


class MoneyMaskError(Exception):
    """Base error for all moneymask operations."""
    pass


class ConfigurationError(MoneyMaskError):
    """Formatting configuration is invalid (e.g. digits in the right symbol)."""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class UnsupportedValueError(MoneyMaskError):
    """Value cannot be rendered as a masked amount (negative, NaN, infinite)."""
    def __init__(self, value: object, reason: str):
        self.value = value
        super().__init__(f"Unsupported value {value!r}: {reason}")
