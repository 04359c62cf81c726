"""Cardiac waveform synthesizer for scrolling patient-monitor displays."""

from ecg_waveform.patterns import (
    Pattern,
    PatternConfig,
    PATTERN_REGISTRY,
    clamp_heart_rate,
    pattern_display_name,
    resolve_pattern,
)
from ecg_waveform.cycle import narrow_complex, wide_complex
from ecg_waveform.timing import BeatSchedule
from ecg_waveform.generator import (
    GeneratorConfig,
    Sample,
    WaveformGenerator,
    generate,
    generate_arrays,
)

__all__ = [
    "Pattern",
    "PatternConfig",
    "PATTERN_REGISTRY",
    "clamp_heart_rate",
    "pattern_display_name",
    "resolve_pattern",
    "narrow_complex",
    "wide_complex",
    "BeatSchedule",
    "GeneratorConfig",
    "Sample",
    "WaveformGenerator",
    "generate",
    "generate_arrays",
]
