"""Additive noise and chaotic baselines used by the rhythm synthesizers."""

from __future__ import annotations

import numpy as np

# Half-widths of the uniform noise terms.
AFIB_NOISE_AMP = 0.05
VFIB_NOISE_AMP = 0.25
ASYSTOLE_NOISE_AMP = 0.01

# (angular step per sample, amplitude) of the VF oscillators.
VFIB_COMPONENTS = ((0.3, 0.4), (0.7, 0.3))


def uniform_noise(
    n_samples: int,
    amplitude: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Uniform noise in ``[-amplitude, amplitude]``."""
    if amplitude == 0.0:
        return np.zeros(n_samples)
    return rng.uniform(-amplitude, amplitude, n_samples)


def add_fibrillatory_baseline(
    signal: np.ndarray,
    rng: np.random.Generator,
    amplitude: float = AFIB_NOISE_AMP,
) -> np.ndarray:
    """Add the irregular atrial baseline of AF."""
    return signal + uniform_noise(len(signal), amplitude, rng)


def vfib_chaos(
    n_samples: int,
    rng: np.random.Generator,
    noise_amp: float = VFIB_NOISE_AMP,
) -> np.ndarray:
    """Chaotic VF waveform: two incommensurate sinusoids plus noise."""
    idx = np.arange(n_samples, dtype=np.float64)
    chaos = np.zeros(n_samples)
    for step, amp in VFIB_COMPONENTS:
        chaos += np.sin(step * idx) * amp
    return chaos + uniform_noise(n_samples, noise_amp, rng)


def flatline(
    n_samples: int,
    rng: np.random.Generator,
    noise_amp: float = ASYSTOLE_NOISE_AMP,
) -> np.ndarray:
    """Near-zero baseline with minimal noise."""
    return uniform_noise(n_samples, noise_amp, rng)
