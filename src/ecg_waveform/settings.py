"""Configuration management for the waveform synthesizer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

from ecg_waveform.exceptions import SettingsError
from ecg_waveform.generator import (
    DEFAULT_DURATION,
    DEFAULT_HEART_RATE,
    DEFAULT_SAMPLE_RATE,
    GeneratorConfig,
)
from ecg_waveform.patterns import Pattern


@dataclass
class GeneratorDefaults:
    """Default generation parameters used when a caller omits them."""

    pattern: str = Pattern.NORMAL_SINUS.value
    heart_rate_bpm: int = DEFAULT_HEART_RATE
    duration_seconds: float = DEFAULT_DURATION
    sample_rate_hz: int = DEFAULT_SAMPLE_RATE


@dataclass
class Settings:
    """Top-level application settings."""

    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        seed = os.getenv("ECG_WAVEFORM_SEED")
        try:
            settings = cls(
                generator=GeneratorDefaults(
                    pattern=os.getenv("ECG_WAVEFORM_PATTERN", Pattern.NORMAL_SINUS.value),
                    heart_rate_bpm=int(os.getenv("ECG_WAVEFORM_HEART_RATE", DEFAULT_HEART_RATE)),
                    duration_seconds=float(os.getenv("ECG_WAVEFORM_DURATION", DEFAULT_DURATION)),
                    sample_rate_hz=int(os.getenv("ECG_WAVEFORM_SAMPLE_RATE", DEFAULT_SAMPLE_RATE)),
                ),
                seed=int(seed) if seed else None,
                log_level=os.getenv("ECG_WAVEFORM_LOG_LEVEL", "INFO"),
            )
        except ValueError as exc:
            raise SettingsError("environment", str(exc)) from exc
        settings.validate("environment")
        return settings

    @classmethod
    def from_yaml(cls, path: str) -> Settings:
        """Load settings from YAML config file."""
        config_path = Path(path)
        if not config_path.exists():
            return cls()
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise SettingsError(path, "top level must be a mapping")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise SettingsError(path, f"unknown keys: {', '.join(sorted(unknown))}")

        settings = cls()
        if "generator" in data:
            try:
                settings.generator = GeneratorDefaults(**(data["generator"] or {}))
            except TypeError as exc:
                raise SettingsError(path, f"generator: {exc}") from exc
        for key in ("seed", "log_level"):
            if key in data:
                setattr(settings, key, data[key])
        settings.validate(path)
        return settings

    def validate(self, source: str) -> None:
        """Check the scalar fields, raising :class:`SettingsError` on bad values."""
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise SettingsError(source, f"seed must be an integer, got {self.seed!r}")
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise SettingsError(source, f"unknown log_level {self.log_level!r}")

    def generator_config(
        self,
        pattern: Optional[str] = None,
        heart_rate_bpm: Optional[float] = None,
        duration_seconds: Optional[float] = None,
        sample_rate_hz: Optional[float] = None,
    ) -> GeneratorConfig:
        """Build a :class:`GeneratorConfig` from the defaults and overrides."""
        g = self.generator
        return GeneratorConfig(
            pattern=pattern if pattern is not None else g.pattern,
            heart_rate_bpm=heart_rate_bpm if heart_rate_bpm is not None else g.heart_rate_bpm,
            duration_seconds=duration_seconds if duration_seconds is not None else g.duration_seconds,
            sample_rate_hz=sample_rate_hz if sample_rate_hz is not None else g.sample_rate_hz,
        )
