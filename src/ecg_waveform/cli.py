"""Command-line preview of synthesised waveforms.

Usage examples:
    ecg-waveform --pattern afib --heart-rate 110 --seed 42
    ecg-waveform --pattern all --duration 5
    ecg-waveform --config config/waveform.yaml
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from ecg_waveform.generator import WaveformGenerator
from ecg_waveform.patterns import Pattern, clamp_heart_rate, pattern_display_name
from ecg_waveform.settings import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Synthesise monitor ECG waveforms and print a summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--pattern", type=str, default=None,
        help="Pattern code (e.g. afib), name (e.g. ATRIAL_FIBRILLATION) or 'all'.",
    )
    parser.add_argument("--heart-rate", type=int, default=None, help="Heart rate in BPM.")
    parser.add_argument("--duration", type=float, default=None, help="Window length in seconds.")
    parser.add_argument("--sample-rate", type=int, default=None, help="Sampling frequency in Hz.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file.")
    return parser


def parse_patterns(value: str) -> list[Pattern]:
    """Strict pattern parsing for the command line."""
    if value.lower() == "all":
        return list(Pattern)
    try:
        return [Pattern(value.lower())]
    except ValueError:
        pass
    try:
        return [Pattern[value.upper()]]
    except KeyError:
        valid = ", ".join(p.value for p in Pattern)
        raise ValueError(f"Unknown pattern '{value}'. Valid: {valid}, all") from None


def summarize(pattern: Pattern, hr: float, amplitude: np.ndarray) -> str:
    """One-line summary of a window generated at the effective rate *hr*."""
    name = pattern_display_name(pattern)
    if amplitude.size == 0:
        return f"  {name:<34} HR={hr:6.1f}  n=0"
    return (
        f"  {name:<34} HR={hr:6.1f}  n={amplitude.size}"
        f"  min={amplitude.min():+.3f}  max={amplitude.max():+.3f}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_yaml(args.config) if args.config else Settings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        patterns = parse_patterns(args.pattern or settings.generator.pattern)
    except ValueError as exc:
        parser.error(str(exc))

    seed = args.seed if args.seed is not None else settings.seed
    gen = WaveformGenerator(seed=seed)
    logger.info("Generating %d pattern(s) with seed=%s", len(patterns), seed)

    requested = args.heart_rate if args.heart_rate is not None else settings.generator.heart_rate_bpm
    for pattern in patterns:
        hr = clamp_heart_rate(pattern, requested)
        config = settings.generator_config(
            pattern=pattern.value,
            heart_rate_bpm=hr,
            duration_seconds=args.duration,
            sample_rate_hz=args.sample_rate,
        )
        _, amplitude = gen.generate_arrays(config)
        print(summarize(pattern, hr, amplitude))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
