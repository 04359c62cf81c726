"""Rhythm pattern definitions, display names and heart-rate clamp policy."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# Lowest heart rate that still yields a finite beat interval.
MIN_HEART_RATE_BPM = 1.0


class Pattern(Enum):
    """Rhythm patterns shown on the monitor, keyed by their UI codes."""

    # Sinus rhythms
    NORMAL_SINUS = "normal"
    TACHYCARDIA = "tachycardia"
    BRADYCARDIA = "bradycardia"

    # Supraventricular
    ATRIAL_FIBRILLATION = "afib"

    # Ventricular
    VENTRICULAR_EXTRASYSTOLE = "ves"
    VENTRICULAR_FIBRILLATION = "vfib"

    # Ischaemic
    ST_ELEVATION = "st_elevation"
    ST_DEPRESSION = "st_depression"

    # Other
    ASYSTOLE = "asystole"


@dataclass(frozen=True)
class PatternConfig:
    """Static configuration for a rhythm pattern.

    Attributes:
        display_name: human-readable label for the monitor.
        min_hr: lower clamp for the heart rate in BPM, ``None`` if unbounded.
        max_hr: upper clamp for the heart rate in BPM, ``None`` if unbounded.
        st_offset: amplitude added over the ST window of every beat.
        has_beats: whether the rhythm has an organised beat structure.
    """

    display_name: str
    min_hr: Optional[float] = None
    max_hr: Optional[float] = None
    st_offset: float = 0.0
    has_beats: bool = True


PATTERN_REGISTRY: dict[Pattern, PatternConfig] = {
    # --- Sinus rhythms ---
    Pattern.NORMAL_SINUS: PatternConfig(display_name="Normal Sinus Rhythm"),
    Pattern.TACHYCARDIA: PatternConfig(display_name="Tachycardia", min_hr=120.0),
    Pattern.BRADYCARDIA: PatternConfig(display_name="Bradycardia", max_hr=50.0),
    # --- Supraventricular ---
    Pattern.ATRIAL_FIBRILLATION: PatternConfig(display_name="Atrial Fibrillation"),
    # --- Ventricular ---
    Pattern.VENTRICULAR_EXTRASYSTOLE: PatternConfig(
        display_name="Ventricular Extrasystoles (VES)",
    ),
    Pattern.VENTRICULAR_FIBRILLATION: PatternConfig(
        display_name="Ventricular Fibrillation",
        has_beats=False,
    ),
    # --- Ischaemic ---
    Pattern.ST_ELEVATION: PatternConfig(
        display_name="ST-Elevation (STEMI)",
        st_offset=0.3,
    ),
    Pattern.ST_DEPRESSION: PatternConfig(
        display_name="ST-Depression (Ischemia)",
        st_offset=-0.2,
    ),
    # --- Other ---
    Pattern.ASYSTOLE: PatternConfig(display_name="Asystole", has_beats=False),
}


def resolve_pattern(value: object) -> Pattern:
    """Map a pattern, its code or its member name to a :class:`Pattern`.

    Unrecognised values fall back to ``Pattern.NORMAL_SINUS``.
    """
    if isinstance(value, Pattern):
        return value
    if isinstance(value, str):
        key = value.strip()
        try:
            return Pattern(key.lower())
        except ValueError:
            pass
        try:
            return Pattern[key.upper()]
        except KeyError:
            pass
    logger.warning("Unknown pattern %r, falling back to %s", value, Pattern.NORMAL_SINUS.name)
    return Pattern.NORMAL_SINUS


def pattern_display_name(pattern: Pattern) -> str:
    """Return the monitor label for *pattern*."""
    return PATTERN_REGISTRY[pattern].display_name


def clamp_heart_rate(pattern: Pattern, heart_rate_bpm: float) -> float:
    """Apply the pattern's heart-rate bounds to *heart_rate_bpm*."""
    cfg = PATTERN_REGISTRY[pattern]
    hr = float(heart_rate_bpm)
    if cfg.min_hr is not None:
        hr = max(hr, cfg.min_hr)
    if cfg.max_hr is not None:
        hr = min(hr, cfg.max_hr)
    if not (math.isfinite(hr) and hr >= MIN_HEART_RATE_BPM):
        logger.warning(
            "Heart rate %r bpm is not usable for %s, using %.0f bpm",
            heart_rate_bpm, pattern.name, MIN_HEART_RATE_BPM,
        )
        hr = MIN_HEART_RATE_BPM
    return hr
