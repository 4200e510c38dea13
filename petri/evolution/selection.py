"""
Selection strategies for the genetic algorithm.

Selection decides which individuals get to reproduce. A strategy is
handed the population and a function giving each individual's
selection chance, and returns one parent per call; the algorithm
calls it twice for every child it breeds.

Available strategies:
- Roulette wheel: fitness-proportional, via rejection sampling
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, TypeVar

from ..rand import PetriRand
from .individual import Individual

I = TypeVar('I', bound=Individual)


class SelectionMethod(ABC):
    """Picks one parent from a population."""

    @abstractmethod
    def select(
        self,
        rng: PetriRand,
        population: Sequence[I],
        selection_chance: Callable[[I], float],
    ) -> Optional[I]:
        """
        Select one individual.

        Args:
            rng: Random source.
            population: Candidates.
            selection_chance: Maps an individual to its probability
                              of being picked, in [0, 1].

        Returns:
            The selected individual, or None if there is nothing to
            select from.
        """


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportional (roulette wheel) selection.

    Repeatedly draws a uniformly random individual and accepts it with
    probability equal to its selection chance, usually its share of
    the population's total fitness. The accepted individual is
    therefore picked with probability proportional to its fitness.

    The loop only ends once someone is accepted: callers must make sure
    at least one individual has a non-zero chance. An individual with
    zero fitness is never accepted.

    Example:
        selection = RouletteWheelSelection()
        total = sum(ind.fitness for ind in population)
        parent = selection.select(rng, population, lambda ind: ind.fitness / total)
    """

    def select(
        self,
        rng: PetriRand,
        population: Sequence[I],
        selection_chance: Callable[[I], float],
    ) -> Optional[I]:
        if not population:
            return None

        while True:
            candidate = rng.sample(population)
            if rng.chance(selection_chance(candidate)):
                return candidate

    def __repr__(self) -> str:
        return 'RouletteWheelSelection()'


def get_selection_strategy(
    strategy_name: str,
    **kwargs,
) -> Any:
    """
    Factory function for selection strategies.

    Args:
        strategy_name: Currently only 'roulette'.
        **kwargs: Arguments for the strategy.

    Returns:
        Selection strategy instance.
    """
    strategies = {
        'roulette': RouletteWheelSelection,
    }

    if strategy_name not in strategies:
        raise ValueError(f"Unknown selection strategy: {strategy_name}")

    return strategies[strategy_name](**kwargs)
