"""
Pytest fixtures for petri tests.

Provides fixtures for:
- Seeded random generators
- Network topologies and weights
- Small simulation configurations
"""
import pytest
from typing import List

from petri.evolution import EvolutionConfig
from petri.rand import PetriRand
from petri.simulation import SimulationConfig


@pytest.fixture
def rng() -> PetriRand:
    """Return a generator with a fixed seed."""
    return PetriRand.with_seed(0)


@pytest.fixture
def small_topology() -> List[int]:
    """Return a small three-layer topology."""
    return [3, 2, 1]


@pytest.fixture
def small_topology_weights() -> List[float]:
    """Return hand-picked weights for `small_topology`, in flat order."""
    return [
        # hidden neuron 0: bias, coefficient, weights
        0.5, 0.1, -0.3, 0.8, 0.1,
        # hidden neuron 1
        0.5, 0.1, -0.3, -0.8, -0.1,
        # output neuron
        0.5, 0.1, 0.4, -0.2,
    ]


@pytest.fixture
def small_config() -> SimulationConfig:
    """Return a small, fast simulation configuration."""
    return SimulationConfig(
        world_width=200.0,
        world_height=200.0,
        creatures=6,
        food=10,
        fov_range=100.0,
        cells=5,
        hidden_sizes=(4,),
        generation_length=20,
        evolution=EvolutionConfig(mutation_chance=0.1, mutation_coeff=0.2),
    )
