"""Helpers for ``#key: value`` metadata lines."""

import re
from pathlib import PurePath

# A single tag line: "#title: Amazing Grace", "  #Author:John Newton"
TAG_LINE_RE = re.compile(r"^\s*#(\w+):\s*(.+)$")


def parse_metadata_block(block: str) -> dict[str, str]:
    """Return the tags found in *block* as a ``{key: value}`` mapping.

    Keys are lowercased, keys and values are trimmed.  Lines that are not tag
    lines are ignored.  When a key occurs more than once the last value wins.
    """
    metadata: dict[str, str] = {}
    for line in block.splitlines():
        match = TAG_LINE_RE.match(line)
        if match:
            metadata[match.group(1).strip().lower()] = match.group(2).strip()
    return metadata


def get_filename_without_extension(path: str) -> str | None:
    """Return the file stem of *path*, or ``None`` for an empty path."""
    stem = PurePath(path).stem
    return stem or None
