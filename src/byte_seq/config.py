import os
from dataclasses import dataclass
from typing import Optional

from .logging_config import setup_logging
from .random_source import seeded_random_source, set_default_random_source

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass
class ByteSeqConfig:
    """
    Process-level settings for byte_seq.

    - random_seed: When set, apply() installs a deterministic default random
      source. Only for tests and reproducible runs, never for key material.
    - debug: Log at DEBUG level instead of INFO.
    """
    random_seed: Optional[int] = None
    debug: bool = False

    @classmethod
    def from_env(cls, env_prefix: str | None = "BYTE_SEQ_") -> 'ByteSeqConfig':
        prefix = env_prefix or ""
        seed = os.getenv(prefix + "RANDOM_SEED")
        return cls(
            random_seed=_parse_int(prefix + "RANDOM_SEED", seed) if seed else None,
            debug=_parse_bool(prefix + "DEBUG", os.getenv(prefix + "DEBUG"), False),
        )

    def apply(self, force: bool = False):
        setup_logging(debug=self.debug, force=force)
        if self.random_seed is not None:
            set_default_random_source(seeded_random_source(self.random_seed))


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"environment variable {name} must be an integer, got {value!r}") from None


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"environment variable {name} must be a boolean, got {value!r}")
