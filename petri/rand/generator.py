"""
Deterministic pseudo-random generator and its derived distributions.

The generator is a single 64-bit word advanced by the wyrand mixing
step. It is fast and reproducible: the same seed produces the same
sequence on every run and in every process. It is not secure.

Every derived distribution (floats, booleans, bounded indices,
probabilities, sampling) is built from `next_u64`, so the whole
stream of decisions made by a simulation is fixed by one seed.

Example:
    rng = PetriRand.with_seed(42)
    rng.normalised_f32()     # in [-1, 1)
    rng.bounded_index(10)    # in [0, 10)
    rng.chance(0.25)         # True roughly a quarter of the time
"""
import threading
from typing import Optional, Sequence, TypeVar

from .entropy import MASK64, generate_entropy

T = TypeVar('T')

WYRAND_INCREMENT = 0xa0761d6478bd642f
WYRAND_XOR = 0xe7037ed1a0b428db

# 2^64 as a float; probabilities are scaled onto the full u64 range.
CHANCE_SCALE = float(1 << 64)

_F32_MANTISSA_BITS = 23


class PetriRand:
    """
    Wyrand pseudo-random generator.

    Instances are meant to have one logical owner at a time. Sharing
    an instance across threads without locking will interleave state
    transitions; use `thread_local()` or `fork()` instead.

    Attributes:
        state: The current 64-bit state word.
    """

    __slots__ = ('state',)

    def __init__(self, seed: Optional[int] = None):
        """
        Create a generator.

        Args:
            seed: 64-bit seed. If None, one is derived from the clock
                  and the calling thread's identity.
        """
        if seed is None:
            seed = generate_entropy()
        self.state = seed & MASK64

    @classmethod
    def with_seed(cls, seed: int) -> 'PetriRand':
        """Create a generator whose output is fully determined by `seed`."""
        return cls(seed)

    @classmethod
    def new(cls) -> 'PetriRand':
        """Create a generator seeded from clock and thread entropy."""
        return cls(None)

    def reseed(self, seed: int) -> None:
        """Reset the generator in place to the start of `seed`'s sequence."""
        self.state = seed & MASK64

    def fork(self) -> 'PetriRand':
        """
        Derive an independent generator from this one.

        The child is seeded with this generator's next output, so the
        parent advances by one step and the child's sequence is fixed
        by the parent's seed.
        """
        return PetriRand(self.next_u64())

    def next_u64(self) -> int:
        """Advance the state and return 64 random bits."""
        state = (self.state + WYRAND_INCREMENT) & MASK64
        self.state = state
        t = state * (state ^ WYRAND_XOR)
        return ((t >> 64) ^ t) & MASK64

    def next_u32(self) -> int:
        """Return the low 32 bits of the next draw."""
        return self.next_u64() & 0xFFFFFFFF

    def uniform_f32(self) -> float:
        """
        Return a single-precision float uniformly distributed in [0, 1).

        Uses the top 23 bits of a 32-bit draw as the mantissa, so the
        result is always exactly representable as a float32.
        """
        mantissa = self.next_u32() >> (32 - _F32_MANTISSA_BITS)
        return mantissa / float(1 << _F32_MANTISSA_BITS)

    def normalised_f32(self) -> float:
        """Return a float uniformly distributed in [-1, 1)."""
        return self.uniform_f32() * 2.0 - 1.0

    def boolean(self) -> bool:
        """Return True or False with equal probability."""
        return self.next_u64() & 1 == 0

    def bounded_index(self, n: int) -> int:
        """
        Return an integer uniformly distributed in [0, n).

        Multiplies a 64-bit draw by `n` and keeps the high half of the
        128-bit product. Draws whose low half falls below
        `2^64 mod n` would bias the result and are rejected.

        Args:
            n: Exclusive upper bound, 1 <= n <= 2^64.

        Raises:
            ValueError: If `n` is not a positive 64-bit range width.
        """
        if n < 1 or n > 1 << 64:
            raise ValueError(f"Range width must be in [1, 2^64], got {n}")

        product = self.next_u64() * n
        low = product & MASK64
        if low < n:
            threshold = ((1 << 64) - n) % n
            while low < threshold:
                product = self.next_u64() * n
                low = product & MASK64
        return product >> 64

    def chance(self, probability: float) -> bool:
        """
        Return True with the given probability.

        Args:
            probability: A value in [0, 1]. 0.0 never succeeds and 1.0
                         always succeeds.

        Raises:
            ValueError: If `probability` is outside [0, 1].
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be in [0, 1], got {probability}")

        threshold = int(probability * CHANCE_SCALE)
        if threshold >= MASK64:
            return True
        return self.next_u64() < threshold

    def sample(self, items: Sequence[T]) -> Optional[T]:
        """
        Pick one element uniformly at random.

        Returns None for an empty sequence. A single-element sequence
        returns its element without consuming randomness.
        """
        if not items:
            return None
        if len(items) == 1:
            return items[0]
        return items[self.bounded_index(len(items))]

    def __repr__(self) -> str:
        return f"PetriRand(state={self.state:#018x})"


_root_lock = threading.Lock()
_root: Optional[PetriRand] = None
_local = threading.local()


def thread_local() -> PetriRand:
    """
    Return the generator owned by the calling thread.

    Created lazily on first use and seeded from a process-wide root
    generator, so threads never share state transitions. The root is
    only touched (under a lock) the first time each thread asks.
    """
    rng = getattr(_local, 'rng', None)
    if rng is None:
        global _root
        with _root_lock:
            if _root is None:
                _root = PetriRand.new()
            seed = _root.next_u64()
        rng = PetriRand(seed)
        _local.rng = rng
    return rng
