"""Subtitle discovery for video items.

Guards the media-type precondition and forwards to the injected
``SubtitleProber``.
"""
from __future__ import annotations

import logging

from ..core.models import ExtendedItemInfo
from ..core.protocols import SubtitleProber

logger = logging.getLogger(__name__)


class SubtitleOrchestrator:
    """Detects and loads subtitles through a media-probing collaborator.

    Usage:
        orchestrator = SubtitleOrchestrator(prober)
        orchestrator.detect_subtitles(item)
        orchestrator.load_subtitle_content(item)
    """

    def __init__(self, prober: SubtitleProber, video_type_prefix: str = "video"):
        """Initialize the orchestrator.

        Args:
            prober: Collaborator that finds and reads subtitle tracks.
            video_type_prefix: Media types starting with this get subtitles.
        """
        self._prober = prober
        self._video_type_prefix = video_type_prefix

    def supports(self, item: ExtendedItemInfo) -> bool:
        """Whether subtitle detection applies to ``item``."""
        return item.type.startswith(self._video_type_prefix)

    def detect_subtitles(self, item: ExtendedItemInfo) -> None:
        """Populate ``item.subtitles`` for video items; no-op otherwise."""
        if not self.supports(item):
            logger.debug(f"subtitles are not supported for this file : {item.name}")
            return
        parent_dir = item.real_path.parent
        item.subtitles = self._prober.detect_all_subtitles(item.real_path, parent_dir, item.mod_time)

    def load_subtitle_content(self, item: ExtendedItemInfo) -> None:
        """Load content for the already detected tracks of ``item``."""
        self._prober.load_all_subtitle_content(item.real_path, item.subtitles, item.mod_time)
