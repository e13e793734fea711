"""Filesystem primitives for a file-browsing backend.

Symlink resolution, natural ordering of listings and subtitle discovery for
video items.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import CoreConfig, LogLevel
from .core.errors import BrowseCoreError, ResolutionError, ResolutionErrorKind
from .core.models import ResolvedPath, ItemInfo, FileInfo, SubtitleTrack, ExtendedItemInfo
from .core.protocols import NamedEntry, SubtitleProber

# Service exports
from .services.resolver import PathResolver, resolve_symlinks
from .services.ordering import compare_names, sort_entries, sort_items
from .services.subtitles import SubtitleOrchestrator
from .services.app_context import AppContext, create_app_context

# Logging exports
from .logging.rich_logger import setup_logging

__all__ = [
    # Core
    "CoreConfig",
    "LogLevel",
    "BrowseCoreError",
    "ResolutionError",
    "ResolutionErrorKind",
    "ResolvedPath",
    "ItemInfo",
    "FileInfo",
    "SubtitleTrack",
    "ExtendedItemInfo",
    "NamedEntry",
    "SubtitleProber",
    # Services
    "PathResolver",
    "resolve_symlinks",
    "compare_names",
    "sort_entries",
    "sort_items",
    "SubtitleOrchestrator",
    "AppContext",
    "create_app_context",
    # Logging
    "setup_logging",
]
