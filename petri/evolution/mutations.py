"""
Mutation operators for chromosomes.

Mutation perturbs a freshly crossed child so the population keeps
exploring values its parents never had. Topology is fixed, so only
gene values ever change; the chromosome length is preserved.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..rand import PetriRand
from .chromosome import Chromosome


class MutationMethod(ABC):
    """Perturbs a child's genes."""

    @abstractmethod
    def mutate(self, rng: PetriRand, genes: Iterable[float]) -> Chromosome:
        """Return a mutated copy of `genes`."""


class GaussianMutation(MutationMethod):
    """
    Per-gene random perturbation.

    Every gene is independently touched with probability `chance`; a
    touched gene moves by a magnitude drawn uniformly from [0, coeff)
    in a random direction.

    Attributes:
        chance: Probability of changing a gene.
                0.0 = no genes are touched, 1.0 = all genes are touched.
        coeff: Magnitude of a change.
               0.0 = touched genes stay the same,
               3.0 = touched genes move by at most 3.0 either way.

    Example:
        mutation = GaussianMutation(chance=0.01, coeff=0.3)
        child = mutation.mutate(rng, child)
    """

    def __init__(self, chance: float = 0.01, coeff: float = 0.3):
        """
        Initialize the mutation operator.

        Raises:
            ValueError: If `chance` is outside [0, 1] or `coeff` is negative.
        """
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance must be in [0, 1], got {chance}")
        if not coeff >= 0.0:
            raise ValueError(f"Mutation coefficient must be non-negative, got {coeff}")

        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: PetriRand, genes: Iterable[float]) -> Chromosome:
        return Chromosome(self._mutate_gene(rng, gene) for gene in genes)

    def _mutate_gene(self, rng: PetriRand, gene: float) -> float:
        if not rng.chance(self.chance):
            return gene
        sign = -1.0 if rng.boolean() else 1.0
        return gene + sign * self.coeff * rng.uniform_f32()

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"


def get_mutation_strategy(
    strategy_name: str,
    **kwargs,
) -> Any:
    """
    Factory function for mutation operators.

    Args:
        strategy_name: Currently only 'gaussian'.
        **kwargs: Arguments for the operator (chance, coeff).
    """
    strategies = {
        'gaussian': GaussianMutation,
    }

    if strategy_name not in strategies:
        raise ValueError(f"Unknown mutation strategy: {strategy_name}")

    return strategies[strategy_name](**kwargs)
