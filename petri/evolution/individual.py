"""
The Individual capability required by the genetic algorithm.

The algorithm never looks inside an individual: it only needs a
fitness score, a chromosome, and a way to wrap a freshly bred
chromosome into a new individual of the same kind.
"""
from abc import ABC, abstractmethod

from .chromosome import Chromosome


class Individual(ABC):
    """
    Base class for anything that can be evolved.

    Subclasses decide where fitness comes from (food eaten by a
    creature, a test stub's gene sum, ...).
    """

    @property
    @abstractmethod
    def fitness(self) -> float:
        """Fitness score; higher is better, never negative."""

    @property
    @abstractmethod
    def chromosome(self) -> Chromosome:
        """The individual's genes."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        """Build a new individual of this kind from offspring genes."""
