"""
Random sources used to generate new byte sequences.

Any object with a ``randbytes(n)`` method can be injected; ``random.Random``
and ``random.SystemRandom`` both qualify. The process-wide default is a
``random.SystemRandom``, which reads from ``os.urandom`` and is safe to share
between threads.
"""

import logging
import random
import threading
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can hand out ``n`` random bytes."""

    def randbytes(self, n: int) -> bytes:
        ...


_SYSTEM_SOURCE: RandomSource = random.SystemRandom()
_default_source: RandomSource = _SYSTEM_SOURCE
_lock = threading.Lock()


def default_random_source() -> RandomSource:
    """Return the process-wide source used when no ``rng`` is passed."""
    return _default_source


def set_default_random_source(source: Optional[RandomSource]) -> RandomSource:
    """
    Replace the process-wide random source.

    Args:
        source: The new default, or None to restore the system source.

    Returns:
        The source that was the default before the call, so callers can
        restore it afterwards.

    Raises:
        TypeError: If ``source`` has no ``randbytes`` method
    """
    global _default_source

    if source is None:
        source = _SYSTEM_SOURCE
    elif not isinstance(source, RandomSource):
        raise TypeError(
            f"random source must provide randbytes(n), got {type(source).__name__}"
        )

    with _lock:
        previous = _default_source
        _default_source = source

    logger.info(f"Default random source set to {type(source).__name__}")
    return previous


def seeded_random_source(seed: int) -> random.Random:
    """
    Create a deterministic source for tests and reproducible runs.

    The result is a plain Mersenne Twister and must never be used for
    key material.
    """
    logger.warning(f"Using seeded random source (seed={seed}); output is predictable")
    return random.Random(seed)
