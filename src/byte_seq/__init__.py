from .sequence import ByteSequence, byte_seq
from .checkable import Checkable
from .errors import ByteSequenceError, InvalidKeyLen, InvalidKeyChars
from .visitor import CheckableVisitor
from .random_source import (
    RandomSource,
    default_random_source,
    set_default_random_source,
    seeded_random_source,
)
from .config import ByteSeqConfig
from .logging_config import setup_logging

__all__ = [
    "ByteSequence",
    "byte_seq",
    "Checkable",
    "CheckableVisitor",
    # Errors
    "ByteSequenceError",
    "InvalidKeyLen",
    "InvalidKeyChars",
    # Random sources
    "RandomSource",
    "default_random_source",
    "set_default_random_source",
    "seeded_random_source",
    # Ambient
    "ByteSeqConfig",
    "setup_logging",
]
