# src/iirfx/filters/__init__.py

from .base_filter import RecursiveFilter
from .GenericFilter import GenericFilter, FilterStatus
from .Butterworth import Butterworth, FilterType, compute_minimum_order

__all__ = [
    "RecursiveFilter",
    "GenericFilter",
    "FilterStatus",
    "Butterworth",
    "FilterType",
    "compute_minimum_order",
]
