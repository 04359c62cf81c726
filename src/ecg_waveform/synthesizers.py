"""Rhythm-specific synthesis strategies.

Every strategy has the signature ``(n_samples, sample_rate_hz, heart_rate_bpm,
rng) -> amplitudes`` and receives a heart rate that has already been clamped
by :func:`ecg_waveform.patterns.clamp_heart_rate`.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ecg_waveform.cycle import QRS_END, narrow_complex, wide_complex
from ecg_waveform.noise import add_fibrillatory_baseline, flatline, vfib_chaos
from ecg_waveform.patterns import PATTERN_REGISTRY, Pattern
from ecg_waveform.timing import (
    BeatSchedule,
    beat_interval_samples,
    ectopic_schedule,
    fixed_schedule,
    irregular_schedule,
)

Synthesizer = Callable[[int, float, float, np.random.Generator], np.ndarray]

# Open window (start, end) of the beat phase shifted by ST deviation.
ST_WINDOW = (QRS_END, 0.60)


def render_schedule(schedule: BeatSchedule) -> np.ndarray:
    """Evaluate the cycle model over a beat schedule."""
    signal = narrow_complex(schedule.phase)
    if schedule.ectopic.any():
        signal = np.where(schedule.ectopic, wide_complex(schedule.phase), signal)
    return signal


def add_st_deviation(
    signal: np.ndarray,
    phase: np.ndarray,
    offset: float,
) -> np.ndarray:
    """Shift the ST window of every beat by *offset*."""
    lo, hi = ST_WINDOW
    return signal + np.where((phase > lo) & (phase < hi), offset, 0.0)


def synthesize_sinus(
    n_samples: int,
    sample_rate_hz: float,
    heart_rate_bpm: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Regular narrow-complex rhythm; also serves tachy- and bradycardia."""
    interval = beat_interval_samples(sample_rate_hz, heart_rate_bpm)
    return render_schedule(fixed_schedule(n_samples, interval))


def synthesize_atrial_fibrillation(
    n_samples: int,
    sample_rate_hz: float,
    heart_rate_bpm: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Irregularly irregular rhythm with a fibrillating baseline."""
    interval = beat_interval_samples(sample_rate_hz, heart_rate_bpm)
    schedule = irregular_schedule(n_samples, interval, rng)
    return add_fibrillatory_baseline(render_schedule(schedule), rng)


def synthesize_ventricular_extrasystole(
    n_samples: int,
    sample_rate_hz: float,
    heart_rate_bpm: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Sinus rhythm with a wide ectopic beat in place of every fifth beat."""
    interval = beat_interval_samples(sample_rate_hz, heart_rate_bpm)
    return render_schedule(ectopic_schedule(n_samples, interval))


def _st_synthesizer(pattern: Pattern) -> Synthesizer:
    offset = PATTERN_REGISTRY[pattern].st_offset

    def synthesize(
        n_samples: int,
        sample_rate_hz: float,
        heart_rate_bpm: float,
        rng: np.random.Generator,
    ) -> np.ndarray:
        interval = beat_interval_samples(sample_rate_hz, heart_rate_bpm)
        schedule = fixed_schedule(n_samples, interval)
        return add_st_deviation(render_schedule(schedule), schedule.phase, offset)

    synthesize.__name__ = f"synthesize_{pattern.value}"
    synthesize.__doc__ = f"Sinus rhythm with the ST segment shifted by {offset:+.1f}."
    return synthesize


def synthesize_ventricular_fibrillation(
    n_samples: int,
    sample_rate_hz: float,
    heart_rate_bpm: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Chaotic waveform without beat structure; heart rate is ignored."""
    return vfib_chaos(n_samples, rng)


def synthesize_asystole(
    n_samples: int,
    sample_rate_hz: float,
    heart_rate_bpm: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Flat line with minimal noise."""
    return flatline(n_samples, rng)


SYNTHESIZERS: dict[Pattern, Synthesizer] = {
    Pattern.NORMAL_SINUS: synthesize_sinus,
    Pattern.TACHYCARDIA: synthesize_sinus,
    Pattern.BRADYCARDIA: synthesize_sinus,
    Pattern.ATRIAL_FIBRILLATION: synthesize_atrial_fibrillation,
    Pattern.VENTRICULAR_EXTRASYSTOLE: synthesize_ventricular_extrasystole,
    Pattern.ST_ELEVATION: _st_synthesizer(Pattern.ST_ELEVATION),
    Pattern.ST_DEPRESSION: _st_synthesizer(Pattern.ST_DEPRESSION),
    Pattern.VENTRICULAR_FIBRILLATION: synthesize_ventricular_fibrillation,
    Pattern.ASYSTOLE: synthesize_asystole,
}
