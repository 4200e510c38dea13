"""
Crossover operators for chromosomes.

Crossover combines two parent chromosomes of equal length into one
child chromosome of that same length. Because every creature brain
shares one topology, genes at the same index always mean the same
parameter in both parents, so gene-wise mixing is safe.
"""
from abc import ABC, abstractmethod
from typing import Any

from ..rand import PetriRand
from .chromosome import Chromosome


class CrossoverMethod(ABC):
    """Combines two parents into one child."""

    @abstractmethod
    def crossover(
        self,
        rng: PetriRand,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        """
        Create a child chromosome.

        Raises:
            ValueError: If the parents have different lengths.
        """


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover.

    Each gene is taken from parent A or parent B on an independent fair
    coin flip. The child never contains a value that neither parent had
    at that index.
    """

    def crossover(
        self,
        rng: PetriRand,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise ValueError(
                f"Parents must have identical lengths, got {len(parent_a)} and {len(parent_b)}"
            )

        return Chromosome(
            a if rng.boolean() else b
            for a, b in zip(parent_a, parent_b)
        )

    def __repr__(self) -> str:
        return 'UniformCrossover()'


def get_crossover_strategy(
    strategy_name: str,
    **kwargs,
) -> Any:
    """
    Factory function for crossover operators.

    Args:
        strategy_name: Currently only 'uniform'.
        **kwargs: Arguments for the operator.
    """
    strategies = {
        'uniform': UniformCrossover,
    }

    if strategy_name not in strategies:
        raise ValueError(f"Unknown crossover strategy: {strategy_name}")

    return strategies[strategy_name](**kwargs)
