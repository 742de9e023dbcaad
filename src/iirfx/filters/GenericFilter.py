# src/iirfx/filters/GenericFilter.py

import logging
from enum import Enum

import numpy as np

from ..exceptions import FilterNotReadyError
from .base_filter import RecursiveFilter

logger = logging.getLogger(__name__)


class FilterStatus(Enum):
    NONE = "none"                          # no coefficients assigned yet
    READY = "ready"
    BAD_COEFFICIENTS = "bad_coefficients"  # empty, mismatched or a[0] == 0


def real_dtype(dtype) -> np.dtype:
    """Checks that `dtype` is a real floating point type and returns it."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"Only real floating point types are accepted, got {dtype}.")
    return dtype


class GenericFilter(RecursiveFilter):
    """
    Direct form I recursive filter over normalized (a, b) coefficients.

    `a` holds the feedback (denominator) terms and `b` the feedforward
    (numerator) terms, both ordered from the current sample backwards.
    The raw and filtered history windows have the same length as the
    coefficient vectors, index 0 being the most recent sample.
    """

    def __init__(self, a=None, b=None, dtype=np.float64):
        self.dtype = real_dtype(dtype)
        self._status = FilterStatus.NONE
        self._a_coeff = np.zeros(0, dtype=self.dtype)
        self._b_coeff = np.zeros(0, dtype=self.dtype)
        self._raw_data = np.zeros(0, dtype=self.dtype)
        self._filtered_data = np.zeros(0, dtype=self.dtype)

        if a is not None or b is not None:
            self.set_coefficients(a if a is not None else [], b if b is not None else [])

    @property
    def status(self) -> FilterStatus:
        return self._status

    @property
    def a_order(self) -> int:
        return len(self._a_coeff)

    @property
    def b_order(self) -> int:
        return len(self._b_coeff)

    def _check_coefficients(self, a_coeff, b_coeff) -> bool:
        if a_coeff.ndim != 1 or b_coeff.ndim != 1:
            return False
        if a_coeff.size == 0 or b_coeff.size == 0:
            return False
        if a_coeff.size != b_coeff.size:
            return False
        if not (np.all(np.isfinite(a_coeff)) and np.all(np.isfinite(b_coeff))):
            return False
        return a_coeff[0] != 0

    def set_coefficients(self, a, b) -> bool:
        """
        Stores new coefficients, normalized so that a[0] == 1, and clears the
        history. Invalid vectors leave the previous coefficients in place and
        flag the filter as BAD_COEFFICIENTS.

        Returns:
            bool: True if the filter is ready to run.
        """
        a_coeff = np.array(a, dtype=self.dtype)
        b_coeff = np.array(b, dtype=self.dtype)

        if not self._check_coefficients(a_coeff, b_coeff):
            logger.warning(
                f"Rejected filter coefficients (len(a)={a_coeff.size}, len(b)={b_coeff.size})."
            )
            self._status = FilterStatus.BAD_COEFFICIENTS
            return False

        self._b_coeff = b_coeff / a_coeff[0]
        self._a_coeff = a_coeff / a_coeff[0]
        self._raw_data = np.zeros(self._a_coeff.size, dtype=self.dtype)
        self._filtered_data = np.zeros(self._a_coeff.size, dtype=self.dtype)
        self._status = FilterStatus.READY
        return True

    def get_coefficients(self):
        """Returns copies of the normalized (a, b) coefficients."""
        return self._a_coeff.copy(), self._b_coeff.copy()

    def step_filter(self, data):
        if self._status is not FilterStatus.READY:
            raise FilterNotReadyError(f"Filter is not ready (status: {self._status.value}).")

        # Slide the history windows by one sample
        self._raw_data[1:] = self._raw_data[:-1]
        self._raw_data[0] = data
        self._filtered_data[1:] = self._filtered_data[:-1]
        self._filtered_data[0] = 0

        self._filtered_data[0] = (np.dot(self._b_coeff, self._raw_data)
                                  - np.dot(self._a_coeff, self._filtered_data))
        return self._filtered_data[0]

    def filter(self, data: np.ndarray) -> np.ndarray:
        data = np.asarray(data, dtype=self.dtype)
        output_data = np.zeros_like(data)
        for i in range(len(data)):
            output_data[i] = self.step_filter(data[i])
        return output_data

    def get_filter_results(self, results: np.ndarray, data) -> bool:
        """
        Filters `data` into the preallocated `results` array.

        Returns:
            bool: False (and nothing filtered) when the sizes differ.
        """
        data = np.asarray(data, dtype=self.dtype)
        if len(results) != len(data):
            return False
        for i in range(len(data)):
            results[i] = self.step_filter(data[i])
        return True

    def reset_filter(self):
        self._raw_data.fill(0)
        self._filtered_data.fill(0)
