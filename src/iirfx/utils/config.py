# src/iirfx/utils/config.py
"""
Configuration Utilities

Loads filter settings from YAML and builds designed filters from them.

A filter section looks like:

    type: bandpass        # lowpass | highpass | bandpass | bandreject
    order: 4
    band: [300.0, 3400.0] # or `cutoff: 1000.0` for lowpass/highpass
    sample_rate: 48000
    dtype: float64
"""

import os
import copy
import logging
from typing import Any, Dict

import numpy as np
import yaml

from ..exceptions import InvalidFilterSpecificationError
from ..filters.Butterworth import Butterworth, FilterType

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "filter": {
        "type": "lowpass",
        "order": 5,
        "cutoff": 10.0,
        "sample_rate": 100.0,
        "dtype": "float64"
    }
}


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to a YAML file. If None, looks in config/filter.yaml
            under the current directory.

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        config_path = os.path.join(os.getcwd(), "config", "filter.yaml")

    if not os.path.exists(config_path):
        logger.info("No config file found. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.info(f"Loading config from {config_path}")
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    if not config:
        logger.warning(f"Config file {config_path} is empty. Using defaults.")
        return copy.deepcopy(DEFAULT_CONFIG)
    return config


def save_config(config: Dict[str, Any], config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Configuration dictionary
        config_path: Path to save to
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.safe_dump(config, f, default_flow_style=False)

    logger.info(f"Config saved to {config_path}")


def build_filter(section: Dict[str, Any]) -> Butterworth:
    """
    Design a Butterworth filter from a config section (see module docstring).
    """
    try:
        filter_type = FilterType(section.get("type", "lowpass"))
    except ValueError as e:
        raise InvalidFilterSpecificationError(f"Unknown filter type: {section.get('type')!r}") from e

    try:
        dtype = np.dtype(section.get("dtype", "float64"))
    except TypeError as e:
        raise InvalidFilterSpecificationError(f"Unknown dtype: {section.get('dtype')!r}") from e

    if not np.issubdtype(dtype, np.floating):
        raise InvalidFilterSpecificationError(f"Filter dtype must be a real floating point type, got {dtype}.")

    order = section.get("order")
    if order is None:
        raise InvalidFilterSpecificationError("Filter config needs an `order` entry.")
    fs = section.get("sample_rate")

    if filter_type.is_band:
        band = section.get("band")
        if band is None or len(band) != 2:
            raise InvalidFilterSpecificationError(
                f"{filter_type.value} filters need a `band: [lower, upper]` entry.")
        return Butterworth(filter_type, order=order, f_lower=band[0], f_upper=band[1],
                           fs=fs, dtype=dtype)
    return Butterworth(filter_type, order=order, fc=section.get("cutoff"), fs=fs, dtype=dtype)
