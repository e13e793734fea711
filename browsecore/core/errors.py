"""Exception types raised by browsecore."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class BrowseCoreError(Exception):
    """Base class for all browsecore errors."""


class ResolutionErrorKind(Enum):
    """Why a path could not be resolved."""
    STAT_FAILED = "stat_failed"
    READLINK_FAILED = "readlink_failed"
    CYCLE_DETECTED = "cycle_detected"
    TOO_MANY_HOPS = "too_many_hops"


_MESSAGES = {
    ResolutionErrorKind.STAT_FAILED: "could not stat path",
    ResolutionErrorKind.READLINK_FAILED: "could not read symlink",
    ResolutionErrorKind.CYCLE_DETECTED: "symlink cycle detected at",
    ResolutionErrorKind.TOO_MANY_HOPS: "too many symlink hops resolving",
}


class ResolutionError(BrowseCoreError):
    """A path could not be resolved to its canonical form.

    ``path`` is the best-effort path reached when resolution stopped. It must
    not be treated as canonical.
    """

    def __init__(
        self,
        kind: ResolutionErrorKind,
        path: Union[str, Path],
        reason: str = "",
        summary: Optional[str] = None,
    ):
        self.kind = kind
        self.path = Path(path)
        message = f"{summary or _MESSAGES[kind]}: {self.path}"
        if reason:
            message = f"{message}, {reason}"
        super().__init__(message)
