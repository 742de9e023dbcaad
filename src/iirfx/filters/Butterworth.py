# src/iirfx/filters/Butterworth.py

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from ..exceptions import InvalidFilterSpecificationError
from ..utils.poly_utils import vieta_expansion, bilinear_transform
from .base_filter import RecursiveFilter
from .GenericFilter import GenericFilter

logger = logging.getLogger(__name__)


class FilterType(Enum):
    LOW_PASS = "lowpass"
    HIGH_PASS = "highpass"
    BAND_PASS = "bandpass"
    BAND_REJECT = "bandreject"

    @property
    def is_band(self) -> bool:
        return self in (FilterType.BAND_PASS, FilterType.BAND_REJECT)


class _Design:
    """Values shared by the steps of one design pass. Low-pass and high-pass
    designs keep their cutoff in f_lower."""

    def __init__(self, order, fs, f_lower, f_upper, dtype):
        real = dtype.type
        self.order = order
        self.fs = real(fs)
        self.f_lower = real(f_lower)
        self.f_upper = real(f_upper) if f_upper is not None else None
        self.dtype = dtype
        self.ctype = np.result_type(dtype, np.complex64)

    def prewarp(self, f):
        return self.fs / np.pi * np.tan(np.pi * f / self.fs)


# Each filter type owns its pole placement, zero placement and gain
# normalization. Poles are analog, zeros are already in the z-plane.

class _LowPass:
    def poles(self, base, d):
        return 2 * np.pi * d.prewarp(d.f_lower) * base

    def zeros(self, d):
        return np.full(d.order, -1, dtype=d.ctype)

    def gain(self, a, b, d):
        return np.sum(a) / np.sum(b)


class _HighPass:
    def poles(self, base, d):
        return 2 * np.pi * d.prewarp(d.f_lower) / base

    def zeros(self, d):
        return np.full(d.order, 1, dtype=d.ctype)

    def gain(self, a, b, d):
        alternate = np.resize(np.array([1, -1], dtype=d.dtype), a.size)
        return np.sum(a * alternate) / np.sum(b * alternate)


class _Band(ABC):
    def center_and_bandwidth(self, d):
        fpw1 = d.prewarp(d.f_lower)
        fpw2 = d.prewarp(d.f_upper)
        return np.sqrt(fpw1 * fpw2), fpw2 - fpw1

    @abstractmethod
    def band_ratio(self, base, ratio):
        pass

    def poles(self, base, d):
        fpw0, bw = self.center_and_bandwidth(d)
        s0 = 2 * np.pi * fpw0
        s = self.band_ratio(base, bw / (2 * fpw0))
        root = 1j * np.sqrt(1 - s * s)
        # Every prototype pole splits into an adjacent pair
        return np.column_stack((s0 * (s + root), s0 * (s - root))).ravel()


class _BandPass(_Band):
    def band_ratio(self, base, ratio):
        return ratio * base

    def zeros(self, d):
        return np.concatenate((np.full(d.order, -1, dtype=d.ctype),
                               np.full(d.order, 1, dtype=d.ctype)))

    def gain(self, a, b, d):
        z0 = np.exp(1j * 2 * np.pi * np.sqrt(d.f_lower * d.f_upper) / d.fs)
        return np.abs(np.polyval(a, z0)) / np.abs(np.polyval(b, z0))


class _BandReject(_Band):
    def band_ratio(self, base, ratio):
        return ratio / base

    def zeros(self, d):
        fpw0, _ = self.center_and_bandwidth(d)
        w0 = 2 * np.arctan(np.pi * fpw0 / d.fs)
        return np.concatenate((np.full(d.order, np.exp(1j * w0), dtype=d.ctype),
                               np.full(d.order, np.exp(-1j * w0), dtype=d.ctype)))

    def gain(self, a, b, d):
        return np.sum(a) / np.sum(b)


_STRATEGIES = {
    FilterType.LOW_PASS: _LowPass(),
    FilterType.HIGH_PASS: _HighPass(),
    FilterType.BAND_PASS: _BandPass(),
    FilterType.BAND_REJECT: _BandReject(),
}


class Butterworth(RecursiveFilter):
    """
    Digital Butterworth filter designed through the bilinear transform.

    The designed coefficients are handed to a GenericFilter, which does the
    actual filtering; this class only forwards to it.

    Examples:
        Butterworth(FilterType.LOW_PASS, order=5, fc=10, fs=100)
        Butterworth.band_pass(order=4, f_lower=300, f_upper=3400, fs=48000)
    """

    def __init__(self, filter_type=FilterType.LOW_PASS, order=None, fc=None, fs=None,
                 f_lower=None, f_upper=None, dtype=np.float64):
        self._type = FilterType(filter_type)
        self._filter = GenericFilter(dtype=dtype)
        self._order = None
        self._fs = None
        self._cutoff = None

        if order is None:
            if any(f is not None for f in (fc, fs, f_lower, f_upper)):
                raise InvalidFilterSpecificationError(
                    "Design frequencies were given without a filter order.")
            return
        if self._type.is_band:
            if fc is not None:
                raise InvalidFilterSpecificationError(
                    f"{self._type.value} filters are defined by f_lower and f_upper, not fc.")
            self.set_band_parameters(order, f_lower, f_upper, fs)
        else:
            if f_lower is not None or f_upper is not None:
                raise InvalidFilterSpecificationError(
                    f"{self._type.value} filters are defined by fc, not a frequency band.")
            self.set_parameters(order, fc, fs)

    @classmethod
    def low_pass(cls, order, fc, fs, dtype=np.float64):
        return cls(FilterType.LOW_PASS, order=order, fc=fc, fs=fs, dtype=dtype)

    @classmethod
    def high_pass(cls, order, fc, fs, dtype=np.float64):
        return cls(FilterType.HIGH_PASS, order=order, fc=fc, fs=fs, dtype=dtype)

    @classmethod
    def band_pass(cls, order, f_lower, f_upper, fs, dtype=np.float64):
        return cls(FilterType.BAND_PASS, order=order, f_lower=f_lower, f_upper=f_upper,
                   fs=fs, dtype=dtype)

    @classmethod
    def band_reject(cls, order, f_lower, f_upper, fs, dtype=np.float64):
        return cls(FilterType.BAND_REJECT, order=order, f_lower=f_lower, f_upper=f_upper,
                   fs=fs, dtype=dtype)

    @property
    def filter_type(self) -> FilterType:
        return self._type

    @property
    def order(self):
        return self._order

    @property
    def sample_rate(self):
        return self._fs

    @property
    def cutoff(self):
        """Design frequencies in Hz: (fc,) or (f_lower, f_upper)."""
        return self._cutoff

    @property
    def dtype(self) -> np.dtype:
        return self._filter.dtype

    @property
    def status(self):
        return self._filter.status

    @property
    def a_order(self) -> int:
        return self._filter.a_order

    @property
    def b_order(self) -> int:
        return self._filter.b_order

    def set_parameters(self, order, fc, fs):
        """
        Redesigns a low-pass or high-pass filter.

        Args:
            order (int): Filter order (number of analog poles).
            fc (float): Cutoff frequency in Hz, 0 < fc < fs / 2.
            fs (float): Sample rate in Hz.
        """
        if self._type.is_band:
            raise InvalidFilterSpecificationError(
                f"{self._type.value} filters need a frequency band, use set_band_parameters().")
        self._check_order(order)
        self._check_sample_rate(fs)
        self._check_frequency(fc, fs, "Cutoff")

        self._compute(order, fs, fc, None)
        self._cutoff = (fc,)

    def set_band_parameters(self, order, f_lower, f_upper, fs):
        """
        Redesigns a band-pass or band-reject filter. The resulting filter has
        2 * order poles.

        Args:
            order (int): Order of the low-pass prototype.
            f_lower (float): Lower band edge in Hz.
            f_upper (float): Upper band edge in Hz, f_lower < f_upper < fs / 2.
            fs (float): Sample rate in Hz.
        """
        if not self._type.is_band:
            raise InvalidFilterSpecificationError(
                f"{self._type.value} filters take a single cutoff, use set_parameters().")
        self._check_order(order)
        self._check_sample_rate(fs)
        self._check_frequency(f_lower, fs, "Lower band edge")
        self._check_frequency(f_upper, fs, "Upper band edge")
        if f_lower >= f_upper:
            raise InvalidFilterSpecificationError(
                f"Lower band edge ({f_lower} Hz) must be less than upper band edge ({f_upper} Hz).")

        self._compute(order, fs, f_lower, f_upper)
        self._cutoff = (f_lower, f_upper)

    @staticmethod
    def _check_order(order):
        if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order <= 0:
            raise InvalidFilterSpecificationError(f"Order must be a positive integer, got {order!r}.")

    @staticmethod
    def _check_sample_rate(fs):
        if fs is None or not fs > 0:
            raise InvalidFilterSpecificationError(f"Sample rate must be positive, got {fs!r}.")

    @staticmethod
    def _check_frequency(f, fs, name):
        if f is None or not (0 < f < fs / 2):
            raise InvalidFilterSpecificationError(
                f"{name} frequency ({f!r} Hz) must be strictly between 0 and Nyquist ({fs / 2} Hz).")

    def _compute(self, order, fs, f_lower, f_upper):
        order = int(order)
        design = _Design(order, fs, f_lower, f_upper, self.dtype)
        strategy = _STRATEGIES[self._type]

        k = np.arange(1, order + 1, dtype=design.dtype)
        theta = (2 * k - 1) * np.pi / (2 * order)
        base = -np.sin(theta) + 1j * np.cos(theta)

        poles = bilinear_transform(design.fs, strategy.poles(base, design))
        zeros = strategy.zeros(design)

        a = np.real(vieta_expansion(poles)).astype(design.dtype)
        b = np.real(vieta_expansion(zeros)).astype(design.dtype)
        b = b * strategy.gain(a, b, design)

        self._filter.set_coefficients(a, b)
        self._order = order
        self._fs = fs
        logger.debug(f"Designed order {order} Butterworth {self._type.value} filter "
                     f"(f={f_lower}, {f_upper}, fs={fs}): a={a}, b={b}")

    @staticmethod
    def find_minimum_order(w_pass, w_stop, a_pass, a_stop):
        """
        Smallest Butterworth order meeting a pass/stop-band attenuation budget.

        Frequencies are normalized to Nyquist (0 < w < 1). A pass-band edge below
        the stop-band edge describes a low-pass, above it a high-pass.

        Args:
            w_pass (float): Pass-band edge.
            w_stop (float): Stop-band edge.
            a_pass (float): Maximum pass-band loss in dB.
            a_stop (float): Minimum stop-band attenuation in dB.

        Returns:
            tuple: (order, cutoff) with the cutoff normalized to Nyquist.
        """
        for name, w in (("Pass-band", w_pass), ("Stop-band", w_stop)):
            if not (0 < w < 1):
                raise InvalidFilterSpecificationError(
                    f"{name} edge ({w!r}) must be strictly between 0 and 1.")
        if w_pass == w_stop:
            raise InvalidFilterSpecificationError("Pass-band and stop-band edges must differ.")
        if abs(a_stop) <= abs(a_pass) or a_pass == 0:
            raise InvalidFilterSpecificationError(
                f"Stop-band attenuation ({a_stop} dB) must exceed a non-zero "
                f"pass-band loss ({a_pass} dB).")

        fw_pass = math.tan(math.pi * w_pass / 2)
        fw_stop = math.tan(math.pi * w_stop / 2)
        if w_pass < w_stop:
            w = abs(fw_stop / fw_pass)
        else:
            w = abs(fw_pass / fw_stop)

        num = 10 ** (0.1 * abs(a_stop)) - 1
        den = 10 ** (0.1 * abs(a_pass)) - 1
        order = int(math.ceil(math.log10(num / den) / (2 * math.log10(w))))

        w0 = w / num ** (1 / (2 * order))
        if w_pass < w_stop:
            wc = fw_pass * w0
        else:
            wc = fw_pass / w0
        return order, 2 * math.atan(wc) / math.pi

    def get_coefficients(self):
        return self._filter.get_coefficients()

    def step_filter(self, data):
        return self._filter.step_filter(data)

    def filter(self, data: np.ndarray) -> np.ndarray:
        return self._filter.filter(data)

    def get_filter_results(self, results: np.ndarray, data) -> bool:
        return self._filter.get_filter_results(results, data)

    def reset_filter(self):
        self._filter.reset_filter()


def compute_minimum_order(w_pass, w_stop, a_pass, a_stop):
    return Butterworth.find_minimum_order(w_pass, w_stop, a_pass, a_stop)
