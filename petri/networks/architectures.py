"""
Network topologies.

A topology is the ordered list of layer widths of a feed-forward
network: the first entry is the input width, the last the output
width, everything in between a hidden layer. Every adjacent pair of
widths is one layer boundary, with one neuron per unit of the later
width.
"""
import numbers
from typing import Iterable, Sequence, Tuple


def validate_topology(topology: Iterable[int]) -> Tuple[int, ...]:
    """
    Check a topology and return it as a tuple.

    Raises:
        ValueError: If there are fewer than two layers, or a width is
                    not a positive integer.
    """
    layers = tuple(topology)

    if len(layers) < 2:
        raise ValueError(
            f"Topology needs at least an input and an output layer, got {list(layers)}"
        )

    for i, width in enumerate(layers):
        if isinstance(width, bool) or not isinstance(width, numbers.Integral) or width < 1:
            raise ValueError(f"Layer {i} width must be a positive integer, got {width!r}")

    return tuple(int(width) for width in layers)


def layer_pairs(topology: Sequence[int]):
    """Yield (input_width, output_width) for every layer boundary."""
    return zip(topology[:-1], topology[1:])


def parameter_count(topology: Sequence[int]) -> int:
    """
    Number of flat weight values a network of this topology holds.

    Each neuron contributes its bias, its leak coefficient and one
    weight per input.
    """
    return sum(output * (inputs + 2) for inputs, output in layer_pairs(topology))


def neuron_count(topology: Sequence[int]) -> int:
    """Number of neurons: the sum of every width but the input layer's."""
    return sum(topology[1:])


def creature_topology(
    cells: int,
    hidden_sizes: Sequence[int] = (22, 11, 6),
    outputs: int = 2,
) -> Tuple[int, ...]:
    """
    Topology for a creature brain.

    The input layer has one unit per eye cell; the default output
    layer drives speed and rotation.

    Example:
        creature_topology(11)  # (11, 22, 11, 6, 2)
    """
    return validate_topology((cells, *hidden_sizes, outputs))
