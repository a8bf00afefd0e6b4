"""Parse errors raised by bytesize."""

from typing import Optional


class ByteSizeError(ValueError):
    """Base class for byte size parse failures."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse {text!r} to a byte size: {reason}")


class MalformedInput(ByteSizeError):
    """The text does not match ``digits [unit]`` or overflows 64 bits."""


class UnknownUnit(ByteSizeError):
    """A unit suffix is present but names no known unit."""

    def __init__(self, text: str, suffix: str, accepted: Optional[tuple] = None):
        self.suffix = suffix
        reason = f"unknown unit {suffix!r}"
        if accepted:
            reason += f", a valid unit must be one of [{', '.join(accepted)}]"
        super().__init__(text, reason)
