"""Core domain models, errors, config and protocols."""
from .protocols import NamedEntry, SubtitleProber
from .models import (
    ResolvedPath,
    ItemInfo,
    FileInfo,
    SubtitleTrack,
    ExtendedItemInfo,
)
from .errors import BrowseCoreError, ResolutionError, ResolutionErrorKind
from .config import CoreConfig, LogLevel, DEFAULT_MAX_SYMLINK_HOPS

__all__ = [
    # Protocols
    "NamedEntry",
    "SubtitleProber",
    # Models
    "ResolvedPath",
    "ItemInfo",
    "FileInfo",
    "SubtitleTrack",
    "ExtendedItemInfo",
    # Errors
    "BrowseCoreError",
    "ResolutionError",
    "ResolutionErrorKind",
    # Config
    "CoreConfig",
    "LogLevel",
    "DEFAULT_MAX_SYMLINK_HOPS",
]
