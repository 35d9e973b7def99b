"""Immutable integer holder with an even-rounding accessor."""

from __future__ import annotations

from dataclasses import dataclass

from adjusted_value.exceptions import AdjustmentOverflowError, ValueOutOfRangeError


def int_range(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


@dataclass(frozen=True)
class ValueHolder:
    """Holds one integer, fixed at construction.

    Attributes:
        value: The stored integer.
        bits: Optional two's-complement width. ``None`` means an unbounded
            Python ``int``; otherwise the value must fit the width and
            adjustment past the maximum raises instead of wrapping.

    Example:
        >>> ValueHolder(41).adjusted_value()
        42
        >>> ValueHolder(-3).adjusted_value()
        -2
    """

    value: int
    bits: int | None = None

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful value here
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"value must be int, got {type(self.value).__name__}")
        if self.bits is not None:
            if self.bits < 2:
                raise ValueError("bits must be at least 2")
            low, high = int_range(self.bits)
            if not low <= self.value <= high:
                raise ValueOutOfRangeError(self.value, self.bits)

    def adjusted_value(self) -> int:
        """Return the value, rounded up to the next even integer if odd.

        Python's ``%`` floors, so ``-3 % 2 == 1`` and negative odd values
        are classified correctly.

        Raises:
            AdjustmentOverflowError: If the holder is bounded and the value
                is the largest representable one.
        """
        a = self.value
        if a % 2 == 0:
            return a
        if self.bits is not None and a == int_range(self.bits)[1]:
            raise AdjustmentOverflowError(a, self.bits)
        return a + 1
