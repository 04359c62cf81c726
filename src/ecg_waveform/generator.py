"""Waveform generator facade, the single entry point for producing samples."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

import numpy as np

from ecg_waveform.patterns import (
    Pattern,
    clamp_heart_rate,
    pattern_display_name,
    resolve_pattern,
)
from ecg_waveform.synthesizers import SYNTHESIZERS

logger = logging.getLogger(__name__)

# Defaults used by the scrolling monitor.
DEFAULT_HEART_RATE = 72
DEFAULT_DURATION = 10.0
DEFAULT_SAMPLE_RATE = 200


class Sample(NamedTuple):
    """One point of the waveform."""

    time: float
    amplitude: float


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters of a single generation call."""

    pattern: Union[Pattern, str] = Pattern.NORMAL_SINUS
    heart_rate_bpm: float = DEFAULT_HEART_RATE
    duration_seconds: float = DEFAULT_DURATION
    sample_rate_hz: float = DEFAULT_SAMPLE_RATE


def sample_count(duration_seconds: float, sample_rate_hz: float) -> int:
    """Number of samples in the window, zero for degenerate inputs."""
    total = duration_seconds * sample_rate_hz
    if not (duration_seconds > 0 and sample_rate_hz > 0 and math.isfinite(total)):
        return 0
    return int(round(total))


class WaveformGenerator:
    """Facade for synthesising monitor waveforms.

    Args:
        seed: random seed for reproducibility. ``None`` for non-deterministic.
        rng: explicit generator; takes precedence over *seed*.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_arrays(self, config: GeneratorConfig) -> tuple[np.ndarray, np.ndarray]:
        """Generate the waveform as ``(time, amplitude)`` float64 arrays."""
        pattern = resolve_pattern(config.pattern)
        n_samples = sample_count(config.duration_seconds, config.sample_rate_hz)
        if n_samples == 0:
            logger.debug(
                "Empty window for %s (duration=%r, sample_rate=%r)",
                pattern.name, config.duration_seconds, config.sample_rate_hz,
            )
            return np.zeros(0), np.zeros(0)

        fs = float(config.sample_rate_hz)
        hr = clamp_heart_rate(pattern, config.heart_rate_bpm)
        synthesize = SYNTHESIZERS.get(pattern, SYNTHESIZERS[Pattern.NORMAL_SINUS])
        amplitude = np.asarray(synthesize(n_samples, fs, hr, self._rng), dtype=np.float64)
        time = np.arange(n_samples, dtype=np.float64) / fs

        logger.debug(
            "Generated %d samples of %s at %.1f bpm (%.1f Hz)",
            n_samples, pattern.name, hr, fs,
        )
        return time, amplitude

    def generate(self, config: GeneratorConfig) -> list[Sample]:
        """Generate the waveform as an ordered list of :class:`Sample`."""
        time, amplitude = self.generate_arrays(config)
        return [Sample(t, y) for t, y in zip(time.tolist(), amplitude.tolist())]

    @staticmethod
    def pattern_display_name(pattern: Union[Pattern, str]) -> str:
        return pattern_display_name(resolve_pattern(pattern))


def generate_arrays(
    pattern: Union[Pattern, str],
    heart_rate_bpm: float = DEFAULT_HEART_RATE,
    duration_seconds: float = DEFAULT_DURATION,
    sample_rate_hz: float = DEFAULT_SAMPLE_RATE,
    rng: Optional[np.random.Generator] = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Functional form of :meth:`WaveformGenerator.generate_arrays`."""
    config = GeneratorConfig(pattern, heart_rate_bpm, duration_seconds, sample_rate_hz)
    return WaveformGenerator(rng=rng).generate_arrays(config)


def generate(
    pattern: Union[Pattern, str],
    heart_rate_bpm: float = DEFAULT_HEART_RATE,
    duration_seconds: float = DEFAULT_DURATION,
    sample_rate_hz: float = DEFAULT_SAMPLE_RATE,
    rng: Optional[np.random.Generator] = None,
) -> list[Sample]:
    """Generate *duration_seconds* of *pattern* sampled at *sample_rate_hz*.

    Args:
        pattern: rhythm pattern, its code or its name; unknown values fall
            back to normal sinus rhythm.
        heart_rate_bpm: requested heart rate; patterns may clamp it.
        duration_seconds: window length. Non-positive gives no samples.
        sample_rate_hz: sampling frequency. Non-positive gives no samples.
        rng: random generator for the noisy patterns. ``None`` uses a fresh
            non-deterministic generator.

    Returns:
        List of ``round(duration_seconds * sample_rate_hz)`` samples.
    """
    config = GeneratorConfig(pattern, heart_rate_bpm, duration_seconds, sample_rate_hz)
    return WaveformGenerator(rng=rng).generate(config)
