import logging
import random
import threading

import pytest

from byte_seq import (
    RandomSource,
    byte_seq,
    default_random_source,
    seeded_random_source,
    set_default_random_source,
)

Key = byte_seq("Key", 16)


class TestDefaultSource:
    """Tests for the process-wide random source"""

    def test_default_is_system_random(self):
        """The default should be backed by the operating system"""
        assert isinstance(default_random_source(), random.SystemRandom)

    def test_stdlib_generators_satisfy_protocol(self):
        """random.Random and SystemRandom should be accepted as sources"""
        assert isinstance(random.Random(), RandomSource)
        assert isinstance(random.SystemRandom(), RandomSource)

    def test_set_returns_previous(self):
        """Swapping the default should hand back the old source"""
        original = default_random_source()
        replacement = random.Random(1)
        assert set_default_random_source(replacement) is original
        assert default_random_source() is replacement

    def test_none_restores_system_source(self):
        """Passing None should reinstate the system source"""
        set_default_random_source(random.Random(1))
        set_default_random_source(None)
        assert isinstance(default_random_source(), random.SystemRandom)

    def test_invalid_source_rejected(self):
        """Objects without randbytes should be refused"""
        with pytest.raises(TypeError, match="randbytes"):
            set_default_random_source(object())

    def test_swap_is_logged(self, caplog):
        """Changing the default should be logged at INFO"""
        with caplog.at_level(logging.INFO, logger="byte_seq.random_source"):
            set_default_random_source(random.Random(1))
        assert "Default random source set to Random" in caplog.text


class TestSeededSource:
    """Tests for deterministic sources"""

    def test_same_seed_same_values(self):
        """Seeded sources should reproduce the same sequence"""
        first = [Key.generate_new(rng=seeded_random_source(7)) for _ in range(2)]
        assert first[0] == first[1]

    def test_different_seeds_differ(self):
        """Different seeds should give different values"""
        assert Key.generate_new(rng=seeded_random_source(1)) != Key.generate_new(rng=seeded_random_source(2))

    def test_warns_about_predictability(self, caplog):
        """Creating a seeded source should warn"""
        with caplog.at_level(logging.WARNING, logger="byte_seq.random_source"):
            seeded_random_source(3)
        assert "predictable" in caplog.text


class TestConcurrentGeneration:
    """Tests for generating values from several threads"""

    def test_threads_produce_distinct_values(self):
        """Concurrent draws from the default source should not collide"""
        results = []
        lock = threading.Lock()

        def worker():
            values = [Key.generate_new() for _ in range(50)]
            with lock:
                results.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert len(set(results)) == 400
