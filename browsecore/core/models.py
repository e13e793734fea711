"""Domain models for directory listings and item metadata."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, Optional


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Canonical identity of a path after symlink resolution."""
    canonical_path: Path
    is_dir: bool

    def __iter__(self) -> Iterator[Any]:
        # Allows ``path, is_dir = resolver.resolve(...)``
        yield self.canonical_path
        yield self.is_dir


@dataclass(slots=True)
class ItemInfo:
    """A single entry of a directory listing."""
    name: str
    size: int = 0
    mod_time: Optional[datetime] = None
    type: str = ""
    is_symlink: bool = False


@dataclass(slots=True)
class FileInfo:
    """A directory listing: folders and files, each kept in caller order."""
    name: str
    path: str = "/"
    folders: list[ItemInfo] = field(default_factory=list)
    files: list[ItemInfo] = field(default_factory=list)

    def sort_items(self) -> None:
        """Sort folders and files in place using natural ordering."""
        from ..services.ordering import sort_items
        sort_items(self.folders, self.files)


@dataclass(slots=True)
class SubtitleTrack:
    """An external subtitle file or an embedded subtitle stream."""
    name: str
    language: Optional[str] = None
    title: Optional[str] = None
    index: Optional[int] = None  # Stream index, None for external files
    codec: Optional[str] = None
    is_file: bool = False
    content: Optional[str] = None

    @property
    def is_embedded(self) -> bool:
        return self.index is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the listing API shape, omitting empty fields."""
        data: dict[str, Any] = {"name": self.name}
        if self.language:
            data["language"] = self.language
        if self.title:
            data["title"] = self.title
        if self.index is not None:
            data["index"] = self.index
        if self.codec:
            data["codec"] = self.codec
        data["isFile"] = self.is_file
        return data


@dataclass(slots=True)
class ExtendedItemInfo:
    """Item metadata extended with media details such as subtitles."""
    name: str
    type: str
    real_path: Path
    mod_time: datetime
    subtitles: list[SubtitleTrack] = field(default_factory=list)
