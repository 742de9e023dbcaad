# src/iirfx/utils/audio_utils.py

import logging

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)


def get_rms(data):
    """
    Root mean square of a signal, 0.0 for an empty one.
    """
    data = np.asarray(data)
    if data.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(data))))


def load_mono(path, dtype=np.float64):
    """
    Reads an audio file and downmixes it to mono.

    Returns:
        tuple: (data, samplerate)
    """
    data, samplerate = sf.read(path, dtype=np.dtype(dtype).name)
    if data.ndim > 1:
        data = data.mean(axis=1).astype(dtype)  # Convert to mono
    logger.info(f"Loaded {len(data)} samples at {samplerate} Hz from {path}")
    return data, samplerate


def filter_file(filt, input_path, output_path):
    """
    Runs `filt` over an audio file and writes the filtered signal.

    The filter is applied with its current history; call reset_filter() first
    for an independent run.

    Args:
        filt: Any recursive filter (GenericFilter, Butterworth).
        input_path (str): Audio file to read.
        output_path (str): Where the filtered audio is written, at the
            input sample rate.

    Returns:
        np.ndarray: The filtered samples.
    """
    dtype = getattr(filt, "dtype", np.float64)
    data, samplerate = load_mono(input_path, dtype=dtype)
    if getattr(filt, "sample_rate", None) not in (None, samplerate):
        logger.warning(f"Filter was designed for {filt.sample_rate} Hz but {input_path} "
                       f"is sampled at {samplerate} Hz.")

    filtered = filt.filter(data)
    sf.write(output_path, filtered, samplerate)
    logger.info(f"Filtered audio saved to {output_path} (RMS {get_rms(data):.4f} -> {get_rms(filtered):.4f})")
    return filtered
