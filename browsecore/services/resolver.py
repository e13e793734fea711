"""Symlink resolution service.

Resolves a path to its canonical form and classifies it as a file or a
directory. The platform's canonicalization is tried first; if it fails the
path is walked one symlink at a time with a cycle guard and a hop budget, so
every call terminates.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Union

from ..core.config import DEFAULT_MAX_SYMLINK_HOPS
from ..core.errors import ResolutionError, ResolutionErrorKind
from ..core.models import ResolvedPath

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

RESOLVED_STAT_FAILED = "could not stat resolved path"


class PathResolver:
    """Resolves symlinks into a canonical path.

    Holds no state between calls and is safe to share across threads.
    """

    def __init__(self, max_hops: int = DEFAULT_MAX_SYMLINK_HOPS):
        """Initialize the resolver.

        Args:
            max_hops: Maximum symlinks followed by the manual fallback.
        """
        if max_hops < 1:
            raise ValueError("max_hops must be at least 1")
        self._max_hops = max_hops

    @property
    def max_hops(self) -> int:
        return self._max_hops

    def resolve(self, path: PathLike) -> ResolvedPath:
        """Resolve ``path`` and classify the result.

        Args:
            path: Path to resolve, absolute or relative.

        Returns:
            ResolvedPath with the canonical path and whether it is a directory.

        Raises:
            ResolutionError: stat or readlink failed, a cycle was found, or
                the hop budget ran out.
        """
        path = os.fspath(path)
        try:
            resolved = self._canonicalize(path)
        except (OSError, ValueError) as exc:
            logger.debug(f"Canonicalization failed for {path} ({exc}), resolving manually")
            return self._resolve_manually(path)

        try:
            info = os.stat(resolved)
        except (OSError, ValueError) as exc:
            raise ResolutionError(
                ResolutionErrorKind.STAT_FAILED, resolved, str(exc), summary=RESOLVED_STAT_FAILED,
            ) from exc
        return ResolvedPath(Path(resolved), stat.S_ISDIR(info.st_mode))

    def _canonicalize(self, path: str) -> str:
        """Resolve every symlink in ``path``; raises if any component is missing."""
        return os.path.realpath(path, strict=True)

    def _resolve_manually(self, path: str) -> ResolvedPath:
        """Follow symlinks one hop at a time."""
        seen: set[str] = set()
        current = path
        for _ in range(self._max_hops):
            if current in seen:
                logger.debug(f"Symlink cycle at {current}")
                raise ResolutionError(ResolutionErrorKind.CYCLE_DETECTED, current)
            seen.add(current)

            try:
                info = os.lstat(current)
            except (OSError, ValueError) as exc:
                raise ResolutionError(ResolutionErrorKind.STAT_FAILED, current, str(exc)) from exc
            if not stat.S_ISLNK(info.st_mode):
                return ResolvedPath(Path(current), stat.S_ISDIR(info.st_mode))

            try:
                target = os.readlink(current)
            except OSError as exc:
                raise ResolutionError(ResolutionErrorKind.READLINK_FAILED, current, str(exc)) from exc
            # Absolute targets replace the path, relative ones hang off its parent
            current = os.path.normpath(os.path.join(os.path.dirname(current), target))

        logger.debug(f"Gave up on {path} after {self._max_hops} hops")
        raise ResolutionError(ResolutionErrorKind.TOO_MANY_HOPS, path)


_default_resolver = PathResolver()


def resolve_symlinks(path: PathLike) -> ResolvedPath:
    """Resolve ``path`` with the default 64-hop resolver."""
    return _default_resolver.resolve(path)
