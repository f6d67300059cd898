"""Shared test fixtures for Blot.

Golden digests live in tests/vectors.py.
"""

import pytest

from blot.engine.digest import available_algorithms
from blot.models.config import HashConfig, SequenceMode


@pytest.fixture
def config() -> HashConfig:
    """The documented baseline: sha2-256, sequences as lists."""
    return HashConfig()


@pytest.fixture
def set_config() -> HashConfig:
    return HashConfig(sequence_mode=SequenceMode.SET)


@pytest.fixture(params=available_algorithms())
def any_config(request) -> HashConfig:
    """Baseline configuration for each registered algorithm."""
    return HashConfig(algorithm=request.param)


