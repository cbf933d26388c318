"""pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import sys

import numpy as np
import pytest

# Ensure tests/ dir is on path so test_fpbase imports work
sys.path.insert(0, os.path.dirname(__file__))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def random_transactions(rng: np.random.Generator) -> list[list[str]]:
    """60 baskets over 8 items with skewed item popularity."""
    items = list("abcdefgh")
    popularity = np.linspace(0.7, 0.1, len(items))
    return [[item for item, p in zip(items, popularity) if rng.random() < p] for _ in range(60)]
