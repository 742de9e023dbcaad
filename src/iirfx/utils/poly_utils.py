# src/iirfx/utils/poly_utils.py

import numpy as np


def vieta_expansion(roots):
    """
    Build the coefficients of the monic polynomial whose roots are `roots`.

    The result is ordered from the highest power down to the constant term,
    so c[0] is always 1 and len(c) == len(roots) + 1. Roots are accumulated
    one at a time from left to right by convolving with [1, -root]; keep
    that order, regrouping changes rounding in the low coefficients.

    Args:
        roots (array_like): Complex roots.

    Returns:
        np.ndarray: Complex coefficients.
    """
    roots = np.asarray(roots)
    if not np.iscomplexobj(roots):
        roots = roots.astype(np.result_type(roots.dtype, np.complex64))

    coeffs = np.ones(1, dtype=roots.dtype)
    for root in roots:
        coeffs = np.convolve(coeffs, np.array([1, -root], dtype=roots.dtype))
    return coeffs


def bilinear_transform(fs, pole):
    """
    Map a continuous-time pole to the discrete-time domain.

    z = (2*fs + s) / (2*fs - s). A pole sitting exactly at s = 2*fs maps to
    infinity; pre-warped design frequencies never get there.
    """
    return (2 * fs + pole) / (2 * fs - pole)

