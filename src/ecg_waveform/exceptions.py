"""Exception hierarchy for the waveform synthesizer."""


class WaveformError(Exception):
    """Base exception for all waveform synthesizer errors."""


class SettingsError(WaveformError):
    """Raised when settings cannot be loaded."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid settings in '{source}': {detail}")
