"""
Headless simulation glue around the core.

This module provides:
- SimulationConfig: world, eye, brain, movement and evolution settings
- Creature, Brain, Control: agents that see, think and steer
- CreatureIndividual: adapts a creature's brain to the genetic algorithm
- World: steps creatures through food-gathering generations
"""
from .config import SimulationConfig
from .creature import Brain, Control, Creature
from .individual import CreatureIndividual
from .world import World

__all__ = [
    'SimulationConfig',
    'Brain',
    'Control',
    'Creature',
    'CreatureIndividual',
    'World',
]
