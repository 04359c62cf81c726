"""Beat timing disciplines: fixed, irregular and periodic-ectopic."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Jitter bounds applied to the base RR interval by the irregular discipline.
RR_JITTER_RANGE = (0.7, 1.3)

# Every n-th beat (1-based) is ectopic under the ectopic discipline.
ECTOPIC_EVERY = 5

_MIN_INTERVAL = np.finfo(np.float64).tiny
_MAX_PHASE = np.nextafter(1.0, 0.0)
# Beat counts past this are not resolvable at float64 precision anyway.
_MAX_BEAT_INDEX = float(2 ** 62)


@dataclass
class BeatSchedule:
    """Per-sample beat clock for a window of ``len(phase)`` samples.

    Attributes:
        phase: position within the current beat, in ``[0, 1)``.
        beat_index: 0-based index of the beat each sample falls in.
        ectopic: ``True`` for samples of beats that use the wide complex.
        onsets: sample indices at which a beat starts.
        interval: base beat interval in samples.
    """

    phase: np.ndarray
    beat_index: np.ndarray
    ectopic: np.ndarray
    onsets: np.ndarray
    interval: float

    @property
    def n_beats(self) -> int:
        return len(self.onsets)


def beat_interval_samples(sample_rate_hz: float, heart_rate_bpm: float) -> float:
    """Number of samples per beat at the given rate, never zero."""
    return max(sample_rate_hz * 60.0 / heart_rate_bpm, _MIN_INTERVAL)


def _phase_clock(n_samples: int, interval: float) -> tuple[np.ndarray, np.ndarray]:
    idx = np.arange(n_samples, dtype=np.float64)
    phase = np.minimum(np.mod(idx, interval) / interval, _MAX_PHASE)
    with np.errstate(over="ignore"):
        beats = np.floor(idx / interval)
    beat_index = np.minimum(beats, _MAX_BEAT_INDEX).astype(np.int64)
    return phase, beat_index


def _onsets_from_beat_index(beat_index: np.ndarray) -> np.ndarray:
    # Beats shorter than a sample share a start; only distinct samples count.
    return np.flatnonzero(np.diff(beat_index, prepend=-1))


def fixed_schedule(n_samples: int, interval: float) -> BeatSchedule:
    """Deterministic schedule with a constant beat interval."""
    phase, beat_index = _phase_clock(n_samples, interval)
    return BeatSchedule(
        phase=phase,
        beat_index=beat_index,
        ectopic=np.zeros(n_samples, dtype=bool),
        onsets=_onsets_from_beat_index(beat_index),
        interval=interval,
    )


def generate_irregular_onsets(
    n_samples: int,
    interval: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Walk a running next-beat boundary with jittered RR intervals.

    The first beat starts at sample 0. Whenever the sample index reaches the
    boundary, the next boundary is set to ``i + interval * jitter`` with
    jitter drawn uniformly from :data:`RR_JITTER_RANGE`.

    Returns:
        1-D int array of onset sample indices.
    """
    lo, hi = RR_JITTER_RANGE
    onsets: list[int] = []
    onset = 0
    while onset < n_samples:
        onsets.append(onset)
        next_beat = onset + interval * rng.uniform(lo, hi)
        onset = max(onset + 1, int(math.ceil(next_beat)))
    return np.asarray(onsets, dtype=np.int64)


def irregular_schedule(
    n_samples: int,
    interval: float,
    rng: np.random.Generator,
) -> BeatSchedule:
    """Schedule with randomised RR intervals.

    Onsets and beat indices follow the jittered boundaries, but ``phase`` is
    still measured against the base interval, so the waveform shape clock
    does not follow the irregular onsets.
    """
    phase, _ = _phase_clock(n_samples, interval)
    onsets = generate_irregular_onsets(n_samples, interval, rng)
    beat_index = np.searchsorted(onsets, np.arange(n_samples), side="right") - 1
    return BeatSchedule(
        phase=phase,
        beat_index=beat_index.astype(np.int64),
        ectopic=np.zeros(n_samples, dtype=bool),
        onsets=onsets,
        interval=interval,
    )


def ectopic_schedule(
    n_samples: int,
    interval: float,
    every: int = ECTOPIC_EVERY,
) -> BeatSchedule:
    """Fixed schedule where every *every*-th beat is flagged ectopic."""
    schedule = fixed_schedule(n_samples, interval)
    schedule.ectopic = schedule.beat_index % every == every - 1
    return schedule
