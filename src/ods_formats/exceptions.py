class OdsFormatsError(Exception):
    """Base class for other exceptions."""


class ValueFormatError(OdsFormatsError):
    """Raised when a value format cannot be applied to a value."""


class NaNError(ValueFormatError):
    """Raised when a numeric format attribute is not a number."""

    def __init__(self, name: str = None, value: str = None) -> None:
        self.name = name
        self.value = value
        if name is None:
            super().__init__("Digit expected")
        else:
            super().__init__(f"Digit expected for '{name}', got '{value}'")


class DetachedError(OdsFormatsError, RuntimeError):
    """Raised when detached data is accessed."""


class UnsupportedWarning(Warning):
    """Raised for unsupported value types."""
