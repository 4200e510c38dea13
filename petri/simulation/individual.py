"""
Genome adapter between creatures and the genetic algorithm.

A creature's chromosome is its brain's flat weight sequence; its
fitness is the food it ate this generation.
"""
from typing import List

from ..evolution import Chromosome, Individual
from .creature import Creature


class CreatureIndividual(Individual):
    """
    Evolvable snapshot of a creature.

    Example:
        population = [CreatureIndividual.from_creature(c) for c in creatures]
        new_population, stats = ga.evolve(rng, population)
        for creature, individual in zip(creatures, new_population):
            creature.brain.network.adjust_weights(individual.into_weights())
    """

    def __init__(self, fitness: float, chromosome: Chromosome):
        self._fitness = fitness
        self._chromosome = chromosome

    @classmethod
    def from_creature(cls, creature: Creature) -> 'CreatureIndividual':
        return cls(
            fitness=creature.fitness,
            chromosome=Chromosome(creature.brain.network.weights()),
        )

    @property
    def fitness(self) -> float:
        return self._fitness

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'CreatureIndividual':
        return cls(fitness=0.0, chromosome=chromosome)

    def into_weights(self) -> List[float]:
        """Flat network weights encoded by this individual."""
        return self._chromosome.to_list()

    def __repr__(self) -> str:
        return f"CreatureIndividual(fitness={self._fitness}, genes={len(self._chromosome)})"
