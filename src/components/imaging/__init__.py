"""Pixel-level image transforms on uint8 BGR/BGRA numpy arrays"""
from src.components.imaging.lut import LookupTable
from src.components.imaging.geometry_ops import GeometryOps
from src.components.imaging.filter_ops import FilterOps
from src.components.imaging.color_ops import ColorOps

__all__ = [
    "LookupTable",
    "GeometryOps",
    "FilterOps",
    "ColorOps",
]
