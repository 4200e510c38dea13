"""
Population evolution.

The GeneticAlgorithm maps one generation to the next:
1. Compute fitness statistics for the current population
2. Select two parents per child (fitness-proportional)
3. Cross their chromosomes
4. Mutate the result
5. Wrap it back into an individual

The new population has the same size as the old one but no
positional correspondence to it, and there is no elitism: even the
fittest parent only survives through its offspring.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

from ..rand import PetriRand
from .crossover import CrossoverMethod, get_crossover_strategy
from .individual import Individual
from .mutations import MutationMethod, get_mutation_strategy
from .selection import SelectionMethod, get_selection_strategy
from .statistics import Statistics, StatisticsBuilder

logger = logging.getLogger(__name__)

I = TypeVar('I', bound=Individual)


@dataclass
class EvolutionConfig:
    """Configuration for the genetic algorithm."""

    # Selection
    selection_strategy: str = 'roulette'

    # Crossover
    crossover_strategy: str = 'uniform'

    # Mutation
    mutation_strategy: str = 'gaussian'
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3


class GeneticAlgorithm:
    """
    Generic genetic algorithm over pluggable strategies.

    Works with any `Individual` subclass; offspring are created with
    the class of the population's members.

    Example:
        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(chance=0.01, coeff=0.3),
        )

        result = ga.evolve(rng, population)
        if result is not None:
            population, stats = result
            print(f"avg fitness: {stats.avg_fitness:.2f}")
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    @classmethod
    def from_config(cls, config: EvolutionConfig) -> 'GeneticAlgorithm':
        """Build the algorithm described by an `EvolutionConfig`."""
        return cls(
            get_selection_strategy(config.selection_strategy),
            get_crossover_strategy(config.crossover_strategy),
            get_mutation_strategy(
                config.mutation_strategy,
                chance=config.mutation_chance,
                coeff=config.mutation_coeff,
            ),
        )

    def evolve(
        self,
        rng: PetriRand,
        population: Sequence[I],
    ) -> Optional[Tuple[List[I], Statistics]]:
        """
        Breed the next generation.

        Args:
            rng: Random source for every decision in this step.
            population: Current generation, all with chromosomes of
                        the same length.

        Returns:
            (new population, statistics of the current population), or
            None when the population is empty or its total fitness is
            exactly zero. In that case there is no selection pressure
            and the caller should simply try again later.
        """
        if not population:
            logger.debug("Skipping evolution: empty population")
            return None

        stats = StatisticsBuilder.from_population(population)

        if stats.has_no_fitness():
            logger.debug("Skipping evolution: total fitness is zero")
            return None

        total_fitness = stats.total_fitness

        def selection_chance(individual: I) -> float:
            return individual.fitness / total_fitness

        individual_cls = type(population[0])
        offspring = []

        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population, selection_chance)
            parent_b = self.selection_method.select(rng, population, selection_chance)

            child = self.crossover_method.crossover(
                rng,
                parent_a.chromosome,
                parent_b.chromosome,
            )
            child = self.mutation_method.mutate(rng, child)

            offspring.append(individual_cls.create(child))

        logger.debug(f"Evolved {len(offspring)} individuals ({stats})")

        return offspring, stats
