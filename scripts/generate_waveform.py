#!/usr/bin/env python3
"""CLI wrapper around :mod:`ecg_waveform.cli`.

Usage examples:
    python scripts/generate_waveform.py --pattern ves --heart-rate 60 --duration 5
    python scripts/generate_waveform.py --pattern all --seed 42
"""

from ecg_waveform.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
