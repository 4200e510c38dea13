"""
Per-generation fitness statistics.

Statistics are folded over the population one individual at a time,
so a single pass yields min, max, total and average fitness.
"""
import math
from dataclasses import dataclass
from typing import Iterable

from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    """Fitness statistics for one generation."""
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    total_fitness: float

    def has_no_fitness(self) -> bool:
        """True when the population has nothing to select on."""
        return self.total_fitness == 0.0

    def __str__(self) -> str:
        return (
            f"min={self.min_fitness:.2f}, max={self.max_fitness:.2f}, "
            f"avg={self.avg_fitness:.2f}, total={self.total_fitness:.2f}"
        )


class StatisticsBuilder:
    """
    Streaming accumulator for `Statistics`.

    Example:
        builder = StatisticsBuilder()
        for individual in population:
            builder.add_sample(individual)
        stats = builder.build()
    """

    def __init__(self):
        self.min_fitness = math.inf
        self.max_fitness = -math.inf
        self.sum_fitness = 0.0
        self.total_samples = 0

    def add_sample(self, individual: Individual) -> 'StatisticsBuilder':
        """Fold one individual's fitness in; returns self for chaining."""
        fitness = individual.fitness

        self.min_fitness = min(self.min_fitness, fitness)
        self.max_fitness = max(self.max_fitness, fitness)
        self.sum_fitness += fitness
        self.total_samples += 1

        return self

    def build(self) -> Statistics:
        """
        Finish the fold.

        Raises:
            ValueError: If no samples were added.
        """
        if not self.total_samples:
            raise ValueError("Cannot build statistics from an empty population")

        return Statistics(
            min_fitness=self.min_fitness,
            max_fitness=self.max_fitness,
            avg_fitness=self.sum_fitness / self.total_samples,
            total_fitness=self.sum_fitness,
        )

    @classmethod
    def from_population(cls, population: Iterable[Individual]) -> Statistics:
        """Compute statistics for a whole population in one pass."""
        builder = cls()
        for individual in population:
            builder.add_sample(individual)
        return builder.build()
