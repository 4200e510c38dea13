"""
Neural network infrastructure for creature brains.

This module provides:
- Network: fixed-topology feed-forward network with per-neuron
  parametric ReLU activations and flat weight import/export
- Topology helpers and presets
- Weight serialization/deserialization
"""
from .network import Network, Neuron
from .architectures import (
    validate_topology,
    parameter_count,
    neuron_count,
    creature_topology,
)
from .serialization import serialize_weights, deserialize_weights, clone_network

__all__ = [
    # Network
    'Network',
    'Neuron',

    # Topologies
    'validate_topology',
    'parameter_count',
    'neuron_count',
    'creature_topology',

    # Serialization
    'serialize_weights',
    'deserialize_weights',
    'clone_network',
]
