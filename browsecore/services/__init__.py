"""Service layer - path resolution, ordering and subtitle orchestration."""
from .resolver import PathResolver, resolve_symlinks
from .ordering import compare_names, numeric_key, sort_entries, sort_items
from .subtitles import SubtitleOrchestrator
from .app_context import AppContext, build_resolver, build_subtitle_orchestrator, create_app_context

__all__ = [
    # Resolution
    "PathResolver",
    "resolve_symlinks",
    # Ordering
    "compare_names",
    "numeric_key",
    "sort_entries",
    "sort_items",
    # Subtitles
    "SubtitleOrchestrator",
    # App context
    "AppContext",
    "build_resolver",
    "build_subtitle_orchestrator",
    "create_app_context",
]
