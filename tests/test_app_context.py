"""Tests for service wiring."""
import logging
import os
import pytest
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

from rich.logging import RichHandler

from browsecore.core.config import CoreConfig
from browsecore.core.models import ExtendedItemInfo
from browsecore.services.app_context import (
    AppContext,
    build_resolver,
    build_subtitle_orchestrator,
    create_app_context,
)
from browsecore.logging.rich_logger import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo handlers installed by AppContext."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestFactories:
    """Tests for the build_* helpers."""

    def test_resolver_uses_hop_budget(self):
        resolver = build_resolver(CoreConfig(max_symlink_hops=5))
        assert resolver.max_hops == 5

    def test_orchestrator_uses_prefix(self):
        prober = MagicMock()
        orchestrator = build_subtitle_orchestrator(CoreConfig(video_type_prefix="movie"), prober)
        item = ExtendedItemInfo(
            name="a.mp4",
            type="movie/mp4",
            real_path=Path("/m/a.mp4"),
            mod_time=datetime(2024, 1, 1),
        )

        orchestrator.detect_subtitles(item)

        prober.detect_all_subtitles.assert_called_once()


class TestAppContext:
    """Tests for AppContext."""

    def test_defaults(self):
        ctx = create_app_context()
        assert ctx.config == CoreConfig()
        assert ctx.resolver.max_hops == 64

    def test_without_prober(self):
        ctx = AppContext(CoreConfig())
        with pytest.raises(RuntimeError):
            ctx.subtitles

    def test_with_prober(self):
        ctx = create_app_context(prober=MagicMock())
        assert ctx.subtitles.supports(
            ExtendedItemInfo(
                name="x.mkv",
                type="video/x-matroska",
                real_path=Path("/m/x.mkv"),
                mod_time=datetime(2024, 1, 1),
            )
        )

    def test_resolver_works(self, tmp_path: Path):
        target = tmp_path / "file.txt"
        target.write_text("x")

        resolved = create_app_context().resolver.resolve(target)

        assert resolved.canonical_path == Path(os.path.realpath(target))
        assert resolved.is_dir is False

    def test_applies_log_level(self, restore_logger):
        """The configured log level reaches the package logger."""
        create_app_context(CoreConfig(log_level="DEBUG"))

        assert restore_logger.level == logging.DEBUG
        handlers = [h for h in restore_logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG

    def test_log_level_from_file(self, tmp_path: Path, restore_logger):
        """A level loaded from JSON is applied as well."""
        config_path = tmp_path / "browsecore.json"
        config_path.write_text('{"log_level": "WARNING"}')

        AppContext(CoreConfig.from_file(config_path))

        assert restore_logger.level == logging.WARNING
