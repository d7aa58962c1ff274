"""Reading mode values and their display lookup tables."""

from enum import Enum
from typing import Dict


class ReadingMode(Enum):
    SILENT = "silent"
    AUDIO_MANUAL = "audio_manual"
    AUDIO_AUTO = "audio_auto"

    @property
    def has_audio(self) -> bool:
        return self is not ReadingMode.SILENT


# Freedesktop theme icon names, resolved through QIcon.fromTheme.
READING_MODE_ICONS: Dict[ReadingMode, str] = {
    ReadingMode.SILENT: "audio-volume-muted",
    ReadingMode.AUDIO_MANUAL: "audio-volume-high",
    ReadingMode.AUDIO_AUTO: "media-playback-start",
}

READING_MODE_LABELS: Dict[ReadingMode, str] = {
    ReadingMode.SILENT: "音声なし",
    ReadingMode.AUDIO_MANUAL: "音声あり（手動）",
    ReadingMode.AUDIO_AUTO: "音声あり（自動）",
}


def reading_mode_from_name(name: str) -> ReadingMode:
    """Factory returning the reading mode for its value string.

    Raises:
        ValueError: If an unknown mode name is provided.
    """
    try:
        return ReadingMode(name)
    except ValueError:
        raise ValueError(f"Unknown reading mode: {name}") from None
