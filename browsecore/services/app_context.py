"""Application context - wires browsecore services from a CoreConfig."""
from __future__ import annotations

import logging
from typing import Optional

from ..core.config import CoreConfig
from ..core.protocols import SubtitleProber
from ..logging.rich_logger import setup_logging
from .resolver import PathResolver
from .subtitles import SubtitleOrchestrator

logger = logging.getLogger(__name__)


def build_resolver(config: CoreConfig) -> PathResolver:
    return PathResolver(max_hops=config.max_symlink_hops)


def build_subtitle_orchestrator(config: CoreConfig, prober: SubtitleProber) -> SubtitleOrchestrator:
    return SubtitleOrchestrator(prober, video_type_prefix=config.video_type_prefix)


class AppContext:
    """Holds the configured services for a file-browsing backend.

    Usage:
        ctx = AppContext(CoreConfig(), prober=my_prober)
        resolved = ctx.resolver.resolve(path)
        ctx.subtitles.detect_subtitles(item)
    """

    def __init__(self, config: CoreConfig, prober: Optional[SubtitleProber] = None):
        """Initialize the context.

        Args:
            config: Core configuration.
            prober: Media-probing collaborator; subtitles are unavailable
                without one.
        """
        self._config = config
        setup_logging(config.log_level)
        self._resolver = build_resolver(config)
        self._subtitles: Optional[SubtitleOrchestrator] = None
        if prober is not None:
            self._subtitles = build_subtitle_orchestrator(config, prober)
        logger.debug(
            f"AppContext initialized (max_hops={config.max_symlink_hops}, "
            f"subtitles={'on' if self._subtitles else 'off'})"
        )

    @property
    def config(self) -> CoreConfig:
        return self._config

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    @property
    def subtitles(self) -> SubtitleOrchestrator:
        """The subtitle orchestrator.

        Raises:
            RuntimeError: No prober was supplied.
        """
        if self._subtitles is None:
            raise RuntimeError("No subtitle prober configured")
        return self._subtitles


def create_app_context(
    config: Optional[CoreConfig] = None,
    prober: Optional[SubtitleProber] = None,
) -> AppContext:
    """Create an AppContext, using default settings when none are given."""
    return AppContext(config or CoreConfig(), prober=prober)
