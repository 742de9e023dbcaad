# src/iirfx/exceptions.py
"""
Filter-specific exceptions.

Design parameters that break the filter contract raise FilterDesignError
(a ValueError). Bad coefficient vectors handed to the engine are not raised,
they are reported through FilterStatus.
"""


class FilterDesignError(ValueError):
    """Raised when a filter cannot be designed from the given parameters"""
    pass


class InvalidFilterSpecificationError(FilterDesignError):
    """Raised when order, frequencies or sample rate are out of range"""
    pass


class FilterProcessingError(RuntimeError):
    """Raised when filtering fails"""
    pass


class FilterNotReadyError(FilterProcessingError):
    """Raised when filtering is requested before valid coefficients are set"""
    pass
