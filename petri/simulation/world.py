"""
Headless simulation world.

A toroidal rectangle with food scattered in it and creatures that
look, think and move. Each step:
1. Creatures close enough to food eat it (the food respawns elsewhere)
2. Every creature perceives food and decides how to steer
3. Every creature moves forward, wrapping around the world's edges

After `generation_length` steps the creatures' brains are evolved
using the food they ate as fitness, and a new generation starts.

There is no rendering and no scheduling here: the caller decides how
often to call `step()`.
"""
import logging
from typing import List, Optional

import numpy as np

from ..evolution import GeneticAlgorithm, Statistics
from ..rand import PetriRand
from ..sensors import wrap, wrap_angle
from .config import SimulationConfig
from .creature import Creature
from .individual import CreatureIndividual

logger = logging.getLogger(__name__)


class World:
    """
    Creatures and food in a wrapping world.

    Example:
        world = World(SimulationConfig(creatures=20), PetriRand.with_seed(7))
        for _ in range(10):
            stats = world.run_generation()
            if stats:
                print(f"Gen {world.generation}: avg={stats.avg_fitness:.2f}")
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[PetriRand] = None,
    ):
        """
        Initialize the world.

        Args:
            config: Simulation configuration; defaults are used if None.
            rng: Random source for every decision the world makes. A
                 clock-seeded generator is created if None.
        """
        self.config = config or SimulationConfig()
        self.rng = rng or PetriRand.new()
        self.ga = GeneticAlgorithm.from_config(self.config.evolution)

        self.creatures: List[Creature] = [
            Creature.random(self.rng, self.config)
            for _ in range(self.config.creatures)
        ]
        self.food = np.array(
            [self._random_position() for _ in range(self.config.food)],
            dtype=np.float64,
        ).reshape(-1, 2)

        self.age = 0
        self.generation = 0

    def _random_position(self) -> np.ndarray:
        return np.array([
            self.rng.uniform_f32() * self.config.world_width,
            self.rng.uniform_f32() * self.config.world_height,
        ])

    def step(self) -> None:
        """Advance the world by one tick."""
        self._process_collisions()
        self._process_brains()
        self._process_movements()
        self.age += 1

    def _process_collisions(self) -> None:
        if not len(self.food):
            return

        for creature in self.creatures:
            offsets = self.food - creature.position
            distances = np.hypot(offsets[:, 0], offsets[:, 1])

            for index in np.flatnonzero(distances < self.config.eat_radius):
                creature.fitness += 1.0
                self.food[index] = self._random_position()

    def _process_brains(self) -> None:
        config = self.config

        for creature in self.creatures:
            control = creature.brain.think(creature.position, creature.rotation, self.food)

            creature.speed = min(
                max(creature.speed + control.speed, config.speed_min),
                config.speed_max,
            )
            creature.rotation = float(wrap_angle(creature.rotation + control.rotation))

    def _process_movements(self) -> None:
        config = self.config

        for creature in self.creatures:
            position = creature.position + creature.forward * creature.speed
            creature.position = np.array([
                wrap(position[0], 0.0, config.world_width),
                wrap(position[1], 0.0, config.world_height),
            ])

    def simulate(self, steps: int) -> None:
        """Run `steps` ticks without evolving."""
        for _ in range(steps):
            self.step()

    def best_creature(self) -> Optional[Creature]:
        """The creature that has eaten the most this generation."""
        if not self.creatures:
            return None
        return max(self.creatures, key=lambda creature: creature.fitness)

    def evolve(self) -> Optional[Statistics]:
        """
        End the current generation.

        Evolves every brain from this generation's fitness, then
        respawns the creatures. If the genetic algorithm has nothing to
        select on (nobody ate), brains are kept as they are and None is
        returned; the generation still ends.

        Returns:
            Statistics of the generation that just ended, or None.
        """
        population = [CreatureIndividual.from_creature(c) for c in self.creatures]
        result = self.ga.evolve(self.rng, population)

        if result is None:
            stats = None
            logger.warning(
                f"Generation {self.generation}: no fitness to select on, keeping brains"
            )
        else:
            offspring, stats = result
            for creature, individual in zip(self.creatures, offspring):
                creature.brain.network.adjust_weights(individual.into_weights())
            logger.info(f"Generation {self.generation} finished: {stats}")

        for creature in self.creatures:
            creature.respawn(self.rng, self.config)

        self.age = 0
        self.generation += 1
        return stats

    def run_generation(self) -> Optional[Statistics]:
        """Simulate the rest of the current generation, then evolve."""
        self.simulate(max(self.config.generation_length - self.age, 0))
        return self.evolve()
