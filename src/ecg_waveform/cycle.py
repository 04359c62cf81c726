"""Piecewise phase model of a single cardiac cycle.

Both shapes take the position within a beat (``phase`` in ``[0, 1)``) and
return the amplitude at that point. They accept scalars or numpy arrays.
Segment boundaries are half-open: the left edge belongs to the later segment.
"""

from __future__ import annotations

import numpy as np

# Segment boundaries as fractions of the beat.
P_END = 0.15
PR_END = 0.20
QRS_END = 0.30
WIDE_QRS_END = 0.50
ST_END = 0.50
T_END = 0.80

P_AMPLITUDE = 0.2
T_AMPLITUDE = 0.3


def _as_phase(phase) -> tuple[np.ndarray, bool]:
    arr = np.asarray(phase, dtype=np.float64)
    return arr, arr.ndim == 0


def narrow_complex(phase):
    """Amplitude of a normal (narrow QRS) beat at *phase*."""
    p, scalar = _as_phase(phase)
    q = (p - PR_END) / (QRS_END - PR_END)
    t = p - ST_END

    out = np.select(
        [
            p < P_END,
            p < PR_END,
            (p < QRS_END) & (q < 0.2),
            (p < QRS_END) & (q < 0.6),
            p < QRS_END,
            p < ST_END,
            p < T_END,
        ],
        [
            np.sin(np.pi * p / P_END) * P_AMPLITUDE,
            0.0,
            -q * 0.5,
            (q - 0.2) * 2.5,
            1.0 - (q - 0.6) * 3,
            0.0,
            np.sin(np.pi * t / (T_END - ST_END)) * T_AMPLITUDE,
        ],
        default=0.0,
    )
    return float(out) if scalar else out


def wide_complex(phase):
    """Amplitude of an ectopic (wide QRS) beat at *phase*.

    No P or T wave; the QRS spans ``[0.2, 0.5)``.
    """
    p, scalar = _as_phase(phase)
    q = (p - PR_END) / (WIDE_QRS_END - PR_END)
    in_qrs = (p >= PR_END) & (p < WIDE_QRS_END)

    out = np.select(
        [
            in_qrs & (q < 0.3),
            in_qrs & (q < 0.7),
            in_qrs,
        ],
        [
            -q * 0.8,
            (q - 0.3) * 2.0,
            0.8 - (q - 0.7) * 2.5,
        ],
        default=0.0,
    )
    return float(out) if scalar else out
