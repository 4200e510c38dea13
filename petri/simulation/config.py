"""
Configuration for a headless simulation run.
"""
import math
from dataclasses import dataclass, field
from typing import Tuple

from ..evolution import EvolutionConfig
from ..networks import creature_topology


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    # World
    world_width: float = 800.0
    world_height: float = 800.0
    creatures: int = 40
    food: int = 60

    # Eye
    fov_range: float = 200.0
    fov_angle: float = math.pi + math.pi / 4
    cells: int = 11

    # Brain
    hidden_sizes: Tuple[int, ...] = (22, 11, 6)

    # Movement
    speed_min: float = 0.001
    speed_max: float = 2.0
    speed_accel: float = 0.2
    rotation_accel: float = math.pi / 2

    # Eating
    eat_radius: float = 5.0

    # Evolution
    generation_length: int = 2500
    evolution: EvolutionConfig = field(default_factory=EvolutionConfig)

    @property
    def topology(self) -> Tuple[int, ...]:
        """Brain topology: one input per eye cell, speed and rotation out."""
        return creature_topology(self.cells, self.hidden_sizes, outputs=2)
