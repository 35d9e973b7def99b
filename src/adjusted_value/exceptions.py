"""Custom exceptions for adjusted-value.

This module defines a hierarchy of exceptions for proper error handling
across the package. All exceptions inherit from AdjustedValueError.
"""

from __future__ import annotations


class AdjustedValueError(Exception):
    """Base exception for all adjusted-value errors.

    Catching this class handles every error raised by the package.
    """

    def __init__(self, message: str = "An error occurred") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(self.message)


# =============================================================================
# Holder Errors
# =============================================================================


class HolderError(AdjustedValueError):
    """Base exception for value holder errors."""

    pass


class ValueOutOfRangeError(HolderError):
    """Raised when a value does not fit the holder's integer width.

    Attributes:
        value: The rejected value.
        bits: Two's-complement width the value was checked against.
    """

    def __init__(
        self,
        value: int,
        bits: int,
        message: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            value: The rejected value.
            bits: Width in bits of the holder.
            message: Optional custom message.
        """
        self.value = value
        self.bits = bits
        msg = message or f"Value {value} does not fit in a {bits}-bit signed integer"
        super().__init__(msg)


class AdjustmentOverflowError(HolderError):
    """Raised when rounding an odd value up would leave the integer range.

    Attributes:
        value: The stored value that could not be adjusted.
        bits: Two's-complement width of the holder.
    """

    def __init__(
        self,
        value: int,
        bits: int,
        message: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            value: The stored value.
            bits: Width in bits of the holder.
            message: Optional custom message.
        """
        self.value = value
        self.bits = bits
        msg = message or f"Adjusting {value} overflows a {bits}-bit signed integer"
        super().__init__(msg)
