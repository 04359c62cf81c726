"""End-to-end tests: settings -> CLI -> generator facade."""

from pathlib import Path

import pytest

from ecg_waveform.cli import main, parse_patterns
from ecg_waveform.patterns import Pattern, pattern_display_name

pytestmark = pytest.mark.integration


class TestParsePatterns:
    def test_all(self):
        assert parse_patterns("all") == list(Pattern)

    def test_code_and_name(self):
        assert parse_patterns("afib") == [Pattern.ATRIAL_FIBRILLATION]
        assert parse_patterns("st_depression") == [Pattern.ST_DEPRESSION]
        assert parse_patterns("Ventricular_Fibrillation") == [Pattern.VENTRICULAR_FIBRILLATION]

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown pattern"):
            parse_patterns("torsades")


class TestMain:
    def test_single_pattern_summary(self, capsys):
        assert main(["--pattern", "ves", "--heart-rate", "60", "--duration", "5"]) == 0
        out = capsys.readouterr().out
        assert "Ventricular Extrasystoles (VES)" in out
        assert "n=1000" in out

    def test_all_patterns(self, capsys):
        assert main(["--pattern", "all", "--seed", "42", "--duration", "2"]) == 0
        out = capsys.readouterr().out
        for pattern in Pattern:
            assert pattern_display_name(pattern) in out

    def test_clamped_rate_is_reported(self, capsys):
        main(["--pattern", "tachycardia", "--heart-rate", "80"])
        assert "HR= 120.0" in capsys.readouterr().out

    def test_empty_window(self, capsys):
        main(["--pattern", "normal", "--duration", "0"])
        assert "n=0" in capsys.readouterr().out

    def test_unknown_pattern_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--pattern", "torsades"])
        assert exc.value.code == 2
        assert "Unknown pattern" in capsys.readouterr().err

    def test_yaml_config(self, tmp_path: Path, capsys):
        path = tmp_path / "waveform.yaml"
        path.write_text("generator:\n  pattern: asystole\n  sample_rate_hz: 100\n")
        assert main(["--config", str(path), "--duration", "3"]) == 0
        out = capsys.readouterr().out
        assert "Asystole" in out
        assert "n=300" in out

    def test_unusable_rate_warns_once_per_pattern(self, caplog, capsys):
        with caplog.at_level("WARNING"):
            main(["--pattern", "normal", "--heart-rate", "0", "--duration", "1"])
        warnings = [r for r in caplog.records if "not usable" in r.getMessage()]
        assert len(warnings) == 1
        assert "HR=   1.0" in capsys.readouterr().out
