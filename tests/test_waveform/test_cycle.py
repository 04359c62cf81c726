"""Tests for the single-cycle phase model."""

import numpy as np
import pytest

from ecg_waveform.cycle import narrow_complex, wide_complex


class TestNarrowComplex:
    @pytest.mark.parametrize(
        "phase, expected",
        [
            (0.0, 0.0),        # start of P wave
            (0.075, 0.2),      # P peak
            (0.17, 0.0),       # PR segment
            (0.21, -0.05),     # Q
            (0.25, 0.75),      # R upstroke
            (0.28, 0.4),       # S downstroke
            (0.4, 0.0),        # ST segment
            (0.65, 0.3),       # T peak
            (0.9, 0.0),        # TP segment
        ],
    )
    def test_segment_values(self, phase, expected):
        assert narrow_complex(phase) == pytest.approx(expected, abs=1e-9)

    def test_scalar_in_scalar_out(self):
        assert isinstance(narrow_complex(0.5), float)

    def test_array_matches_scalar(self, phase_grid):
        vec = narrow_complex(phase_grid)
        assert vec.shape == phase_grid.shape
        for p in phase_grid[::37]:
            assert vec[int(round(p * 1000))] == pytest.approx(narrow_complex(p))

    def test_r_peak_dominates(self, phase_grid):
        wave = narrow_complex(phase_grid)
        assert wave.max() == pytest.approx(1.0, abs=0.05)
        assert 0.2 <= phase_grid[np.argmax(wave)] < 0.3

    def test_amplitude_bounds(self, phase_grid):
        wave = narrow_complex(phase_grid)
        assert wave.min() >= -0.2 - 1e-9
        assert wave.max() <= 1.0 + 1e-9

    def test_p_wave_positive(self, phase_grid):
        p = narrow_complex(phase_grid[(phase_grid > 0) & (phase_grid < 0.15)])
        assert np.all(p > 0)


class TestWideComplex:
    @pytest.mark.parametrize(
        "phase, expected",
        [
            (0.1, 0.0),        # no P wave
            (0.23, -0.08),
            (0.35, 0.4),
            (0.44, 0.55),
            (0.6, 0.0),        # no T wave
            (0.9, 0.0),
        ],
    )
    def test_segment_values(self, phase, expected):
        assert wide_complex(phase) == pytest.approx(expected, abs=1e-9)

    def test_wide_is_broader(self, phase_grid):
        narrow = narrow_complex(phase_grid)
        wide = wide_complex(phase_grid)
        narrow_qrs = np.sum((np.abs(narrow) > 0.05) & (phase_grid >= 0.2) & (phase_grid < 0.5))
        wide_qrs = np.sum(np.abs(wide) > 0.05)
        assert wide_qrs > narrow_qrs

    def test_zero_outside_qrs(self, phase_grid):
        wide = wide_complex(phase_grid)
        outside = (phase_grid < 0.2) | (phase_grid >= 0.5)
        assert np.all(wide[outside] == 0.0)
