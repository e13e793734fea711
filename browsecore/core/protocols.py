"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Protocol

from .models import SubtitleTrack


class NamedEntry(Protocol):
    """Anything that can be ordered in a listing."""

    @property
    def name(self) -> str:
        ...


class SubtitleProber(Protocol):
    """Interface for the media-probing collaborator.

    Implementations inspect the media container (e.g. via ffprobe) and the
    neighbouring directory for subtitle files. Their output format and error
    handling are their own concern.
    """

    @abstractmethod
    def detect_all_subtitles(
        self,
        real_path: Path,
        parent_dir: Path,
        mod_time: datetime,
    ) -> list[SubtitleTrack]:
        """Find embedded streams and external subtitle files for a video."""
        ...

    @abstractmethod
    def load_all_subtitle_content(
        self,
        real_path: Path,
        subtitles: list[SubtitleTrack],
        mod_time: datetime,
    ) -> None:
        """Load the content of every detected track.

        Raises:
            Exception: Loading failed; propagated to the caller unchanged.
        """
        ...
