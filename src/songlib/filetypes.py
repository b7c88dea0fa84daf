"""File formats songlib knows about (as input and output).

Only :attr:`FileType.CLASSIC_SONG` has an importer so far.
"""

from enum import Enum


class FileType(Enum):
    CLASSIC_SONG = ".song"
    CSSF = ".cssf"  # Cantara structured song file (lyrics and scores)
    CCLI_SONGSELECT = ".ccli"


def contains_song_structure(file_type: FileType) -> bool:
    """Whether the format labels its parts (verse, chorus, ...) explicitly."""
    return file_type is not FileType.CLASSIC_SONG


def contains_presentation_order(file_type: FileType) -> bool:
    """Whether the format stores the order in which parts are presented."""
    return file_type is not FileType.CCLI_SONGSELECT


def get_file_type_by_file_ending(ending: str) -> FileType | None:
    """Return the file type for an extension such as ``".song"`` (case-insensitive)."""
    ending = ending.lower()
    if not ending.startswith("."):
        ending = "." + ending
    try:
        return FileType(ending)
    except ValueError:
        return None
