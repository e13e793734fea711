"""Natural ordering of directory entries.

Names whose part before the first dot is an integer compare numerically
against each other ("2.mp4" before "10.mp4"). Every other pair compares the
full names case-insensitively.
"""
from __future__ import annotations

import re
from functools import cmp_to_key
from typing import MutableSequence, Optional

from ..core.protocols import NamedEntry


# Optional sign followed by ASCII digits, nothing else
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def numeric_key(name: str) -> Optional[int]:
    """Return the integer before the first dot, or None if there is none."""
    head = name.split(".")[0]
    if INTEGER_PATTERN.fullmatch(head):
        return int(head)
    return None


def compare_names(a: str, b: str) -> int:
    """Compare two entry names.

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, 0 on a tie.
    """
    num_a = numeric_key(a)
    num_b = numeric_key(b)
    if num_a is not None and num_b is not None:
        return (num_a > num_b) - (num_a < num_b)

    lower_a = a.lower()
    lower_b = b.lower()
    return (lower_a > lower_b) - (lower_a < lower_b)


def _compare_entries(a: NamedEntry, b: NamedEntry) -> int:
    return compare_names(a.name, b.name)


_entry_key = cmp_to_key(_compare_entries)


def sort_entries(entries: MutableSequence[NamedEntry]) -> None:
    """Sort entries in place by name. The sort is stable."""
    entries[:] = sorted(entries, key=_entry_key)


def sort_items(
    folders: MutableSequence[NamedEntry],
    files: MutableSequence[NamedEntry],
) -> None:
    """Sort the folder and file sequences of a listing in place."""
    sort_entries(folders)
    sort_entries(files)
