# src/iirfx/__init__.py
"""
Butterworth IIR filter design and recursive filtering.
"""

# Import and re-export the classes from their respective modules.
from .filters import (
    RecursiveFilter,
    GenericFilter,
    FilterStatus,
    Butterworth,
    FilterType,
    compute_minimum_order,
)
from .exceptions import (
    FilterDesignError,
    InvalidFilterSpecificationError,
    FilterProcessingError,
    FilterNotReadyError,
)

__version__ = "0.1.0"

__all__ = [
    "RecursiveFilter",
    "GenericFilter",
    "FilterStatus",
    "Butterworth",
    "FilterType",
    "compute_minimum_order",
    "FilterDesignError",
    "InvalidFilterSpecificationError",
    "FilterProcessingError",
    "FilterNotReadyError",
]
