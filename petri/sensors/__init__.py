"""
Sensor models for creatures.

This module provides:
- Eye: converts target positions into a per-cell stimulus vector
- wrap / wrap_angle: modular geometry helpers shared with the world
"""
from .eye import Eye, FOV_RANGE, FOV_ANGLE, CELLS
from .utils import wrap, wrap_angle

__all__ = [
    'Eye',
    'FOV_RANGE',
    'FOV_ANGLE',
    'CELLS',
    'wrap',
    'wrap_angle',
]
