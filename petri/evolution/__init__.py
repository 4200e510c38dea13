"""
Genetic algorithm for evolving creature brains.

Evolution works on flat chromosomes (a network's weights) and is
generic over the individuals it evolves and the strategies it uses.

This module provides:
- Chromosome and the abstract Individual capability
- Selection, crossover and mutation strategies
- Per-generation fitness statistics
- GeneticAlgorithm and its EvolutionConfig

Example usage:
    from petri.evolution import GeneticAlgorithm, EvolutionConfig
    from petri.rand import PetriRand

    rng = PetriRand.with_seed(42)
    ga = GeneticAlgorithm.from_config(EvolutionConfig(mutation_chance=0.05))

    result = ga.evolve(rng, population)
    if result is None:
        print("No selection pressure yet, try again next generation")
    else:
        population, stats = result
        print(f"best={stats.max_fitness:.1f} avg={stats.avg_fitness:.1f}")
"""
from .chromosome import Chromosome
from .individual import Individual
from .selection import (
    SelectionMethod,
    RouletteWheelSelection,
    get_selection_strategy,
)
from .crossover import (
    CrossoverMethod,
    UniformCrossover,
    get_crossover_strategy,
)
from .mutations import (
    MutationMethod,
    GaussianMutation,
    get_mutation_strategy,
)
from .statistics import Statistics, StatisticsBuilder
from .population import GeneticAlgorithm, EvolutionConfig

__all__ = [
    # Genetic material
    'Chromosome',
    'Individual',

    # Selection
    'SelectionMethod',
    'RouletteWheelSelection',
    'get_selection_strategy',

    # Crossover
    'CrossoverMethod',
    'UniformCrossover',
    'get_crossover_strategy',

    # Mutations
    'MutationMethod',
    'GaussianMutation',
    'get_mutation_strategy',

    # Statistics
    'Statistics',
    'StatisticsBuilder',

    # Population management
    'GeneticAlgorithm',
    'EvolutionConfig',
]
