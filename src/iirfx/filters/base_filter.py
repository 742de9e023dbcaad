# src/iirfx/filters/base_filter.py
from abc import ABC, abstractmethod
import numpy as np


class RecursiveFilter(ABC):
    """
    Capability shared by everything that runs a recursive (IIR) difference
    equation over samples.
    """

    @property
    @abstractmethod
    def status(self):
        pass

    @abstractmethod
    def get_coefficients(self):
        pass

    @abstractmethod
    def step_filter(self, data):
        """
        Filters one sample and updates the internal history.
        """
        pass

    @abstractmethod
    def filter(self, data: np.ndarray) -> np.ndarray:
        """
        Filters a sequence of samples and updates the internal history.
        """
        pass

    @abstractmethod
    def reset_filter(self):
        pass
