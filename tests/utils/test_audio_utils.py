"""
Unit Tests for audio helpers

Run: pytest tests/utils/test_audio_utils.py -v
"""

import numpy as np
import pytest
import soundfile as sf

from iirfx import Butterworth
from iirfx.utils.audio_utils import get_rms, load_mono, filter_file


@pytest.fixture
def stereo_wav(tmp_path):
    """One second of a 50 Hz + 4 kHz mix, 8 kHz sample rate, two channels."""
    samplerate = 8000
    t = np.arange(samplerate) / samplerate
    mono = 0.4 * np.sin(2 * np.pi * 50 * t) + 0.4 * np.sin(2 * np.pi * 3000 * t)
    path = tmp_path / "mix.wav"
    sf.write(str(path), np.column_stack((mono, mono)), samplerate, subtype="FLOAT")
    return str(path), samplerate


class TestGetRms:

    def test_empty(self):
        assert get_rms(np.array([])) == 0.0

    def test_square_wave(self):
        assert get_rms(np.array([1.0, -1.0, 1.0, -1.0])) == pytest.approx(1.0)


class TestLoadMono:

    def test_stereo_is_downmixed(self, stereo_wav):
        path, samplerate = stereo_wav
        data, sr = load_mono(path)
        assert sr == samplerate
        assert data.ndim == 1
        assert len(data) == samplerate

    def test_dtype(self, stereo_wav):
        data, _ = load_mono(stereo_wav[0], dtype=np.float32)
        assert data.dtype == np.float32


class TestFilterFile:

    def test_lowpass_removes_high_tone(self, stereo_wav, tmp_path):
        path, samplerate = stereo_wav
        out_path = str(tmp_path / "filtered.wav")
        filt = Butterworth.low_pass(6, 200, samplerate)

        filtered = filter_file(filt, path, out_path)

        written, sr = sf.read(out_path)
        assert sr == samplerate
        assert len(written) == len(filtered) == samplerate
        # Only the 50 Hz tone (RMS 0.4 / sqrt(2)) survives once settled
        assert get_rms(filtered[samplerate // 2:]) == pytest.approx(0.4 / np.sqrt(2), rel=0.05)

    def test_matches_direct_filtering(self, stereo_wav, tmp_path):
        path, samplerate = stereo_wav
        filtered = filter_file(Butterworth.high_pass(2, 1000, samplerate), path,
                               str(tmp_path / "out.wav"))
        data, _ = load_mono(path)
        np.testing.assert_array_equal(filtered, Butterworth.high_pass(2, 1000, samplerate).filter(data))
