"""Deterministic random sources for testing."""

from .mock_random import (
    SequenceRandomSource,
    ConstantRandomSource,
    Z_MINUS_ONE_DRAWS,
)
