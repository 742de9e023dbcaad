"""
Pytest Configuration - Shared Fixtures

Reference designs: order 5 Butterworth at a 100 Hz sample rate (10 Hz cutoff
for low-pass and high-pass, 5-15 Hz band for band-pass),
applied to the ramp 1..8.
"""

import pytest
import sys
import os

import numpy as np

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture
def ramp():
    """Input sequence shared by the reference designs."""
    return np.array([1, 2, 3, 4, 5, 6, 7, 8], dtype=np.float64)


@pytest.fixture
def lowpass_reference():
    """Coefficients and ramp response of the order 5, 10 Hz / 100 Hz low-pass."""
    return {
        "a": [1, -2.975422109745684, 3.806018119320413, -2.545252868330468,
              0.881130075437837, -0.125430622155356],
        "b": [0.001282581078961, 0.006412905394803, 0.012825810789607,
              0.012825810789607, 0.006412905394803, 0.001282581078961],
        "output": [0.001282581078961, 0.012794287652606, 0.062686244350084,
                   0.203933712825708, 0.502244959135609, 1.010304217144175,
                   1.744652693589064, 2.678087381460197],
    }


@pytest.fixture
def highpass_reference():
    """Coefficients and ramp response of the order 5, 10 Hz / 100 Hz high-pass."""
    return {
        "a": [1, -2.975422109745683, 3.806018119320411, -2.545252868330467,
              0.8811300754378368, -0.1254306221553557],
        "b": [0.3541641810934298, -1.770820905467149, 3.541641810934299,
              -3.541641810934299, 1.770820905467149, -0.3541641810934298],
        "output": [0.3541641810934298, -0.008704608374924483, -0.3113626313910076,
                   -0.3460321436983160, -0.1787600153274098, 0.04471440201428267,
                   0.2059279258827846, 0.2533941579793959],
    }


@pytest.fixture
def bandpass_reference():
    """Coefficients and ramp response of the order 5, 5-15 Hz / 100 Hz band-pass."""
    return {
        "a": [1, -6.784299264603903, 21.577693329895588, -42.338550072279737,
              56.729081385507655, -54.208087151300411, 37.399203252161037,
              -18.397491390111661, 6.180883710485754, -1.283022311577260,
              0.125430622155356],
        "b": [0.001282581078963, 0, -0.006412905394817, 0, 0.012825810789633, 0,
              -0.012825810789633, 0, 0.006412905394817, 0, -0.001282581078963],
        "output": [0.001282581078963, 0.011266576028733, 0.046195520115810,
                   0.116904647483408, 0.200574194600111, 0.232153315136604,
                   0.141350142008155, -0.086403129422609],
    }
