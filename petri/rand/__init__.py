"""
Pseudo-random number generation for the simulation.

This module provides:
- PetriRand: a seedable wyrand generator with unbiased derived
  distributions (floats, booleans, bounded indices, chance, sample)
- thread_local: a lazily seeded generator per thread
- generate_entropy: clock/thread based seed material
"""
from .entropy import generate_entropy
from .generator import PetriRand, thread_local

__all__ = [
    'PetriRand',
    'thread_local',
    'generate_entropy',
]
