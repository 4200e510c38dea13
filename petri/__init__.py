"""
Petri: creatures with neural-network brains, evolved by a genetic algorithm.

Subpackages:
- rand: deterministic pseudo-random generator and distributions
- sensors: the Eye, turning nearby food into a stimulus vector
- networks: feed-forward brains with flat, serializable weights
- evolution: selection, crossover, mutation and statistics
- simulation: headless world and the creature genome adapter
"""
__version__ = '0.1.0'
