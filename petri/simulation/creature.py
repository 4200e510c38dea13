"""
Creatures and their brains.

A creature sees food through its eye, feeds the stimulus to its
network, and turns the two network outputs into a change of speed
and heading.
"""
import math
from dataclasses import dataclass, field

import numpy as np

from ..networks import Network
from ..rand import PetriRand
from ..sensors import Eye, wrap_angle
from .config import SimulationConfig


@dataclass
class Control:
    """Steering requested by a brain for one step."""
    speed: float = 0.0
    rotation: float = 0.0


class Brain:
    """
    Eye plus network.

    Attributes:
        eye: The creature's sensor.
        network: Maps the eye's stimulus to (speed, rotation) outputs.
        speed_accel: Largest speed change per step.
        rotation_accel: Largest heading change per step, in radians.
    """

    def __init__(
        self,
        eye: Eye,
        network: Network,
        speed_accel: float = 0.2,
        rotation_accel: float = math.pi / 2,
    ):
        if network.input_size != eye.cells:
            raise ValueError(
                f"Network takes {network.input_size} inputs but the eye has {eye.cells} cells"
            )
        if network.output_size < 2:
            raise ValueError("Network needs at least two outputs (speed, rotation)")

        self.eye = eye
        self.network = network
        self.speed_accel = speed_accel
        self.rotation_accel = rotation_accel

    @classmethod
    def random(cls, rng: PetriRand, config: SimulationConfig) -> 'Brain':
        """Create a brain with a randomly initialised network."""
        eye = Eye(config.fov_range, config.fov_angle, config.cells)
        network = Network.random(rng, config.topology)
        return cls(eye, network, config.speed_accel, config.rotation_accel)

    def think(self, position, rotation: float, food) -> Control:
        """
        Decide how to steer this step.

        Args:
            position: Creature position (x, y).
            rotation: Creature heading in radians.
            food: Food positions, shape (N, 2).
        """
        vision = self.eye.perceive(position, rotation, food)
        outputs = self.network.propagate(vision)

        return Control(
            speed=min(max(outputs[0], -self.speed_accel), self.speed_accel),
            rotation=min(max(outputs[1], -self.rotation_accel), self.rotation_accel),
        )


@dataclass
class Creature:
    """A creature in the world; fitness counts the food it has eaten."""
    position: np.ndarray
    rotation: float
    brain: Brain
    speed: float = 0.0
    fitness: float = 0.0

    @classmethod
    def random(cls, rng: PetriRand, config: SimulationConfig) -> 'Creature':
        """Spawn a creature with a random pose and a random brain."""
        creature = cls(
            position=np.zeros(2),
            rotation=0.0,
            brain=Brain.random(rng, config),
        )
        creature.respawn(rng, config)
        return creature

    def respawn(self, rng: PetriRand, config: SimulationConfig) -> None:
        """Move to a random pose and forget this generation's progress."""
        self.position = np.array([
            rng.uniform_f32() * config.world_width,
            rng.uniform_f32() * config.world_height,
        ])
        self.rotation = float(wrap_angle(rng.uniform_f32() * 2.0 * math.pi))
        self.speed = config.speed_min
        self.fitness = 0.0

    @property
    def forward(self) -> np.ndarray:
        """Unit vector the creature is facing."""
        return np.array([-math.sin(self.rotation), math.cos(self.rotation)])
