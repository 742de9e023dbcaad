# src/iirfx/utils/__init__.py

from .poly_utils import vieta_expansion, bilinear_transform

__all__ = [
    "vieta_expansion",
    "bilinear_transform",
]
