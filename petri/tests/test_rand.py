"""
Tests for the pseudo-random generator.

Tests PetriRand and the thread-local helper for:
- Seed determinism, including pinned output values
- Range and distribution of derived values
- Probability edge cases
- Sampling
- Per-thread isolation
"""
import threading
from collections import Counter

import numpy as np
import pytest

from petri.rand import PetriRand, generate_entropy, thread_local

U64_MAX = (1 << 64) - 1


class TestDeterminism:
    """Same seed, same sequence."""

    def test_known_first_value(self):
        """Test that seed 0 always produces the same first draw."""
        assert PetriRand.with_seed(0).next_u64() == 0x111cb3a78f59a58e

    def test_known_state_after_draw(self):
        """Test that the state advances by the fixed increment."""
        rng = PetriRand.with_seed(0)
        rng.next_u64()
        assert rng.state == 0xa0761d6478bd642f

    def test_same_seed_same_sequence(self):
        """Test that equal seeds give equal sequences."""
        a = PetriRand.with_seed(42)
        b = PetriRand.with_seed(42)

        assert [a.next_u64() for _ in range(1000)] == [b.next_u64() for _ in range(1000)]

    def test_different_seeds_differ(self):
        """Test that different seeds give different sequences."""
        a = PetriRand.with_seed(1)
        b = PetriRand.with_seed(2)

        assert [a.next_u64() for _ in range(10)] != [b.next_u64() for _ in range(10)]

    def test_seed_is_masked_to_64_bits(self):
        """Test that seeds wider than 64 bits are truncated."""
        a = PetriRand.with_seed(7)
        b = PetriRand.with_seed(7 + (1 << 64))

        assert a.next_u64() == b.next_u64()

    def test_reseed_restarts_sequence(self):
        """Test that reseeding replays the sequence from the start."""
        rng = PetriRand.with_seed(9)
        first = [rng.next_u64() for _ in range(5)]

        rng.reseed(9)

        assert [rng.next_u64() for _ in range(5)] == first

    def test_fork_is_deterministic(self):
        """Test that forks of equal parents produce equal children."""
        child_a = PetriRand.with_seed(3).fork()
        child_b = PetriRand.with_seed(3).fork()

        assert child_a.next_u64() == child_b.next_u64()

    def test_fork_advances_parent(self):
        """Test that forking consumes exactly one parent draw."""
        parent = PetriRand.with_seed(3)
        reference = PetriRand.with_seed(3)

        parent.fork()
        reference.next_u64()

        assert parent.state == reference.state

    def test_derived_values_are_deterministic(self):
        """Test that derived draws follow the seed too."""
        a = PetriRand.with_seed(5)
        b = PetriRand.with_seed(5)

        for _ in range(100):
            assert a.uniform_f32() == b.uniform_f32()
            assert a.bounded_index(17) == b.bounded_index(17)
            assert a.boolean() == b.boolean()


class TestRanges:
    """Derived values stay in their documented ranges."""

    def test_next_u64_range(self, rng):
        """Test that next_u64 fits in 64 bits."""
        for _ in range(1000):
            assert 0 <= rng.next_u64() <= U64_MAX

    def test_next_u32_range(self, rng):
        """Test that next_u32 fits in 32 bits."""
        for _ in range(1000):
            assert 0 <= rng.next_u32() <= 0xFFFFFFFF

    def test_uniform_f32_range(self, rng):
        """Test that uniform_f32 stays in [0, 1)."""
        for _ in range(10000):
            value = rng.uniform_f32()
            assert 0.0 <= value < 1.0

    def test_uniform_f32_is_single_precision(self, rng):
        """Test that uniform_f32 values survive a float32 round trip."""
        for _ in range(1000):
            value = rng.uniform_f32()
            assert float(np.float32(value)) == value

    def test_normalised_f32_range(self, rng):
        """Test that normalised_f32 covers [-1, 1)."""
        values = [rng.normalised_f32() for _ in range(10000)]

        assert all(-1.0 <= v < 1.0 for v in values)
        assert min(values) < -0.9
        assert max(values) > 0.9

    def test_state_changes_every_draw(self, rng):
        """Test that no draw leaves the state unchanged."""
        states = set()
        for _ in range(100):
            rng.next_u64()
            states.add(rng.state)
        assert len(states) == 100


class TestBoundedIndex:
    """Tests for unbiased bounded integers."""

    @pytest.mark.parametrize('n', [1, 2, 3, 7, 10, 1000, 2**32 + 1, 2**63 + 5, 2**64])
    def test_within_bounds(self, rng, n):
        """Test that results always fall in [0, n)."""
        for _ in range(200):
            assert 0 <= rng.bounded_index(n) < n

    def test_width_one_is_always_zero(self, rng):
        """Test that a width of one always yields zero."""
        assert all(rng.bounded_index(1) == 0 for _ in range(1000))

    @pytest.mark.parametrize('n', [0, -1, 2**64 + 1])
    def test_invalid_width_raises(self, rng, n):
        """Test that empty or oversized ranges are rejected."""
        with pytest.raises(ValueError, match="Range width"):
            rng.bounded_index(n)

    def test_roughly_uniform(self, rng):
        """Test that every bucket is hit about equally often."""
        counts = Counter(rng.bounded_index(10) for _ in range(100000))

        assert set(counts) == set(range(10))
        for bucket in range(10):
            assert 9500 < counts[bucket] < 10500


class TestChance:
    """Tests for probability draws."""

    def test_zero_never_succeeds(self, rng):
        """Test that probability 0 never fires."""
        assert not any(rng.chance(0.0) for _ in range(100000))

    def test_one_always_succeeds(self, rng):
        """Test that probability 1 always fires."""
        assert all(rng.chance(1.0) for _ in range(100000))

    def test_quarter(self, rng):
        """Test that probability 0.25 fires about a quarter of the time."""
        hits = sum(rng.chance(0.25) for _ in range(100000))
        assert 24000 < hits < 26000

    @pytest.mark.parametrize('probability', [-0.1, 1.5, float('nan')])
    def test_invalid_probability_raises(self, rng, probability):
        """Test that probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError, match="Probability"):
            rng.chance(probability)

    def test_boolean_is_fair(self, rng):
        """Test that booleans split roughly evenly."""
        trues = sum(rng.boolean() for _ in range(100000))
        assert 49000 < trues < 51000


class TestSample:
    """Tests for sampling from sequences."""

    def test_empty_returns_none(self, rng):
        """Test sampling from an empty sequence."""
        assert rng.sample([]) is None

    def test_single_element_uses_no_randomness(self, rng):
        """Test that a single element is returned without a draw."""
        state = rng.state

        assert rng.sample(['only']) == 'only'
        assert rng.state == state

    def test_returns_member(self, rng):
        """Test that every element is eventually sampled."""
        items = ['a', 'b', 'c', 'd']
        seen = {rng.sample(items) for _ in range(500)}
        assert seen == set(items)


class TestEntropy:
    """Tests for unseeded construction."""

    def test_entropy_is_odd_u64(self):
        """Test that entropy is an odd 64-bit value."""
        value = generate_entropy()
        assert 0 <= value <= U64_MAX
        assert value & 1 == 1

    def test_new_generator_produces_values(self):
        """Test that an unseeded generator works."""
        rng = PetriRand.new()
        assert 0 <= rng.next_u64() <= U64_MAX


class TestThreadLocal:
    """Tests for per-thread generators."""

    def test_same_thread_same_instance(self):
        """Test that a thread always gets its own generator back."""
        assert thread_local() is thread_local()

    def test_threads_get_own_instances(self):
        """Test that threads never share a generator."""
        main_rng = thread_local()
        results = []

        def worker():
            results.append(thread_local())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4
        ids = {id(r) for r in results}
        assert len(ids) == 4
        assert all(r is not main_rng for r in results)

    def test_threads_are_seeded_differently(self):
        """Test that each thread starts from a different state."""
        states = []

        def worker():
            states.append(thread_local().state)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(states)) == 4
