"""Shared pytest fixtures for waveform synthesizer tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def phase_grid() -> np.ndarray:
    """1000 evenly spaced phases covering one beat."""
    return np.arange(1000) / 1000.0
