"""Exception types raised by quant_mathema."""

from __future__ import annotations

__all__ = ["QuantMathemaError", "InvalidCastError"]


class QuantMathemaError(Exception):
    """Base class for every error raised by quant_mathema."""


class InvalidCastError(QuantMathemaError, ValueError):
    """A value could not be converted to the numeric type a computation needs."""

    default_message = "Invalid cast during computation"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)