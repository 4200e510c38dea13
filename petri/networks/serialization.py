"""
Flat weight codec for networks.

A network is stored as its topology followed by its flat weight
sequence in the canonical order (see `network.py`):

    [u32 layer_count][u32 width] * layer_count [f32 weight] * N

All values are little-endian. The payload is gzip-compressed. The
topology prefix is what lets a reader find neuron boundaries again;
nothing else is needed to rebuild the network exactly.
"""
import gzip
import zlib

import numpy as np

from .architectures import parameter_count, validate_topology
from .network import Network

_U32 = np.dtype('<u4')
_F32 = np.dtype('<f4')


def serialize_weights(network: Network) -> bytes:
    """
    Serialize a network to compressed bytes.

    Args:
        network: The network to store.

    Returns:
        Gzip-compressed topology prefix plus float32 weights.
    """
    header = np.array([len(network.topology), *network.topology], dtype=_U32)
    weights = np.asarray(network.weights(), dtype=_F32)
    return gzip.compress(header.tobytes() + weights.tobytes())


def deserialize_weights(data: bytes) -> Network:
    """
    Rebuild a network from bytes produced by `serialize_weights()`.

    Raises:
        ValueError: If the payload is not gzip data, is truncated, or
                    its weight count does not match its topology.
    """
    try:
        raw = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise ValueError(f"Invalid weight payload: {e}") from e

    if len(raw) < _U32.itemsize:
        raise ValueError("Weight payload is missing its topology header")

    layer_count = int(np.frombuffer(raw, dtype=_U32, count=1)[0])
    header_size = _U32.itemsize * (1 + layer_count)
    if len(raw) < header_size:
        raise ValueError(
            f"Weight payload declares {layer_count} layers but is truncated"
        )

    widths = np.frombuffer(raw, dtype=_U32, count=layer_count, offset=_U32.itemsize)
    topology = validate_topology(int(width) for width in widths)

    body = raw[header_size:]
    if len(body) % _F32.itemsize:
        raise ValueError("Weight payload ends mid-value")

    weights = np.frombuffer(body, dtype=_F32)
    expected = parameter_count(topology)
    if weights.size != expected:
        raise ValueError(
            f"Weight payload holds {weights.size} values, topology "
            f"{list(topology)} needs {expected}"
        )

    return Network.from_weights(topology, weights.tolist())


def clone_network(network: Network) -> Network:
    """Create an independent copy of a network with identical weights."""
    return Network.from_weights(network.topology, network.weights())
