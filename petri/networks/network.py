"""
Feed-forward creature brain.

A Network is a fixed-topology stack of fully connected layers. Every
neuron computes `bias + sum(input_i * weight_i)` and passes the result
through its own parametric ReLU: positive values go through
unchanged, negative values are scaled by the neuron's learned leak
coefficient.

Flat weight order:
    The network can be flattened into, and rebuilt from, one flat
    sequence of floats. Neurons are laid out layer-major (every neuron
    of the first hidden layer, then the next layer, and so on), and
    each neuron contributes

        bias, coefficient, weight_1, ..., weight_n

    where n is the width of the layer feeding it. `weights()`,
    `from_weights()`, `adjust_weights()` and `random()` all use this
    order, and it is the chromosome layout evolution works on.

Example:
    rng = PetriRand.with_seed(0)
    network = Network.random(rng, [3, 4, 2])
    outputs = network.propagate([0.5, 1.0, 0.75])    # two floats
    clone = Network.from_weights([3, 4, 2], network.weights())
"""
from collections import OrderedDict
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple

import torch
import torch.nn as nn
from torch.nn.utils import skip_init

from ..rand import PetriRand
from .architectures import layer_pairs, parameter_count, validate_topology


class Neuron(NamedTuple):
    """Read-only view of one neuron's parameters."""
    bias: float
    coefficient: float
    weights: Tuple[float, ...]


class Network(nn.Module):
    """
    Feed-forward network with per-neuron leaky activations.

    Each layer boundary is an `nn.Linear` (weights and biases) followed
    by an `nn.PReLU` with one leak coefficient per neuron. Parameters
    are float32 and never track gradients: the network is trained by
    evolution, not backpropagation.

    Attributes:
        topology: Layer widths, input first.
    """

    def __init__(self, topology: Iterable[int]):
        """
        Build a network with the given topology.

        Every parameter starts at zero and torch's global random state
        is left alone; use `random()` or `from_weights()` for
        meaningful values.

        Raises:
            ValueError: If the topology is invalid.
        """
        super().__init__()
        self.topology = validate_topology(topology)

        layers = OrderedDict()
        for i, (inputs, outputs) in enumerate(layer_pairs(self.topology)):
            layers[f'linear_{i}'] = skip_init(nn.Linear, inputs, outputs)
            layers[f'prelu_{i}'] = skip_init(nn.PReLU, num_parameters=outputs)

        self._layers = nn.ModuleDict(layers)
        self._layer_order = list(layers.keys())
        self.requires_grad_(False)

        with torch.no_grad():
            for param in self.parameters():
                param.zero_()

    @classmethod
    def random(cls, rng: PetriRand, topology: Iterable[int]) -> 'Network':
        """
        Create a network with every parameter drawn from [-1, 1).

        Values are drawn in the flat weight order, so the same seed
        and topology always produce the same network.
        """
        topology = validate_topology(topology)
        values = [rng.normalised_f32() for _ in range(parameter_count(topology))]
        return cls.from_weights(topology, values)

    @classmethod
    def from_weights(cls, topology: Iterable[int], weights: Iterable[float]) -> 'Network':
        """
        Rebuild a network from a flat weight sequence.

        Raises:
            ValueError: If the sequence is too short or too long for
                        the topology.
        """
        network = cls(topology)
        network.adjust_weights(weights)
        return network

    @property
    def input_size(self) -> int:
        return self.topology[0]

    @property
    def output_size(self) -> int:
        return self.topology[-1]

    @property
    def parameter_count(self) -> int:
        """Length of the flat weight sequence."""
        return parameter_count(self.topology)

    def _boundaries(self) -> Iterator[Tuple[nn.Linear, nn.PReLU]]:
        """Yield the (linear, activation) pair of every layer boundary."""
        for i in range(len(self.topology) - 1):
            yield self._layers[f'linear_{i}'], self._layers[f'prelu_{i}']

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """Forward pass for a batch of shape (batch, input_size)."""
        for layer_id in self._layer_order:
            x = self._layers[layer_id](x)
        return x

    def propagate(self, inputs: Sequence[float]) -> List[float]:
        """
        Run one input vector through the network.

        Args:
            inputs: Exactly `topology[0]` values.

        Returns:
            `topology[-1]` output values.

        Raises:
            ValueError: If the input width does not match the topology.
        """
        x = torch.as_tensor(inputs, dtype=torch.float32).flatten()
        if x.numel() != self.input_size:
            raise ValueError(
                f"Expected {self.input_size} inputs, got {x.numel()}"
            )

        with torch.no_grad():
            return self(x.unsqueeze(0)).squeeze(0).tolist()

    def weights(self) -> List[float]:
        """Flatten every parameter into the canonical flat weight order."""
        chunks = []
        for linear, prelu in self._boundaries():
            per_neuron = torch.cat(
                [linear.bias.unsqueeze(1), prelu.weight.unsqueeze(1), linear.weight],
                dim=1,
            )
            chunks.append(per_neuron.flatten())
        return torch.cat(chunks).tolist()

    def adjust_weights(self, weights: Iterable[float]) -> None:
        """
        Overwrite every parameter from a flat weight sequence, in place.

        The length is checked before anything is written, so a failed
        call leaves the network untouched.

        Raises:
            ValueError: If the sequence is too short or too long.
        """
        if isinstance(weights, torch.Tensor):
            values = weights.detach().to(torch.float32).flatten()
        else:
            values = torch.tensor(list(weights), dtype=torch.float32)

        expected = self.parameter_count
        if values.numel() < expected:
            raise ValueError(
                f"Too few weights given: topology {list(self.topology)} needs "
                f"{expected}, got {values.numel()}"
            )
        if values.numel() > expected:
            raise ValueError(
                f"Too many weights given: topology {list(self.topology)} needs "
                f"{expected}, got {values.numel()}"
            )

        offset = 0
        with torch.no_grad():
            for linear, prelu in self._boundaries():
                outputs, inputs = linear.weight.shape
                size = outputs * (inputs + 2)
                block = values[offset:offset + size].view(outputs, inputs + 2)
                linear.bias.copy_(block[:, 0])
                prelu.weight.copy_(block[:, 1])
                linear.weight.copy_(block[:, 2:])
                offset += size

    def neurons(self) -> Iterator[Neuron]:
        """Yield every neuron in flat weight order."""
        for linear, prelu in self._boundaries():
            biases = linear.bias.tolist()
            coefficients = prelu.weight.tolist()
            rows = linear.weight.tolist()
            for bias, coefficient, row in zip(biases, coefficients, rows):
                yield Neuron(bias, coefficient, tuple(row))

    def extra_repr(self) -> str:
        return f"topology={list(self.topology)}"
