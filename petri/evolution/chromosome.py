"""
Chromosomes: the genetic material evolution operates on.

A chromosome is an ordered sequence of real-valued genes. For
creatures it is exactly a network's flat weight sequence.
"""
from typing import Iterable, Iterator, List

# Machine epsilon of a float32; genes are compared at that tolerance.
F32_EPSILON = 1.1920929e-07


class Chromosome:
    """
    Ordered sequence of float genes.

    Example:
        chromosome = Chromosome([3.0, 1.0, 2.0])
        len(chromosome)      # 3
        chromosome[1]        # 1.0
        list(chromosome)     # [3.0, 1.0, 2.0]
    """

    __slots__ = ('_genes',)

    def __init__(self, genes: Iterable[float] = ()):
        self._genes: List[float] = [float(gene) for gene in genes]

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes)

    def __getitem__(self, index):
        return self._genes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(abs(a - b) <= F32_EPSILON for a, b in zip(self._genes, other._genes))

    __hash__ = None

    def is_empty(self) -> bool:
        return not self._genes

    def to_list(self) -> List[float]:
        """Return a copy of the genes."""
        return list(self._genes)

    def __repr__(self) -> str:
        return f"Chromosome({self._genes!r})"
