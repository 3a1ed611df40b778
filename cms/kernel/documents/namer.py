"""
Document naming rules.

Pure functions: they look only at the names handed to them, never at the disk.
"""

import re
from pathlib import PurePath
from typing import Collection

# Trailing "_<digits>" on a stem, e.g. "report_3"
_INDEX_SUFFIX_RE = re.compile(r"^(?P<stem>.*)_(?P<index>\d+)$")


def is_safe_basename(name: str) -> bool:
    """Allow only simple filenames (no directories)."""
    if not isinstance(name, str) or not name:
        return False
    if name in (".", ".."):
        return False
    if "/" in name or "\\" in name or "\x00" in name:
        return False
    return name == PurePath(name).name


def is_valid_new_name(name: str, existing_names: Collection[str]) -> bool:
    """A new document name must be non-empty and not already taken (case-sensitive)."""
    if not name:
        return False
    return name not in existing_names


def split_name(filename: str) -> tuple[str, str]:
    """
    Split a filename into (stem, extension).

    Dotfiles keep their leading dot in the stem, so ".notes" has no extension.
    """
    path = PurePath(filename)
    return path.stem, path.suffix


def derive_indexed_name(base_filename: str, index: int) -> str:
    """
    Build "<stem>_<index><ext>" from a filename.

    An existing numeric suffix on the stem is replaced rather than stacked:
    ``derive_indexed_name("report_3.md", 5) == "report_5.md"``.
    A zero suffix ("draft_0") is not treated as an index.
    """
    stem, extension = split_name(base_filename)
    match = _INDEX_SUFFIX_RE.match(stem)
    if match and int(match.group("index")) != 0:
        stem = match.group("stem")
    return f"{stem}_{index}{extension}"


def generate_unique_duplicate_name(base_filename: str, existing_names: Collection[str]) -> str:
    """
    Return the first indexed name (starting at 1) not present in existing_names.

    Terminates because every index yields a new candidate and existing_names
    is finite.
    """
    index = 1
    while True:
        candidate = derive_indexed_name(base_filename, index)
        if is_valid_new_name(candidate, existing_names):
            return candidate
        index += 1
