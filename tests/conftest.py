"""
Shared fixtures for byte_seq tests.
"""

import pytest

from byte_seq import random_source


@pytest.fixture(autouse=True)
def restore_default_random_source():
    """Undo any change a test makes to the process-wide random source."""
    previous = random_source.default_random_source()
    yield
    random_source.set_default_random_source(previous)
