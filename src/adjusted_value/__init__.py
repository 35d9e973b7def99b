"""adjusted-value - Integer holder that rounds odd values up to even."""

__version__ = "0.1.0"

from adjusted_value.config import Settings
from adjusted_value.exceptions import (
    AdjustedValueError,
    AdjustmentOverflowError,
    HolderError,
    ValueOutOfRangeError,
)
from adjusted_value.holder import ValueHolder

__all__ = [
    "AdjustedValueError",
    "AdjustmentOverflowError",
    "HolderError",
    "Settings",
    "ValueHolder",
    "ValueOutOfRangeError",
    "__version__",
]
