"""File-level entry points: pick an importer by extension and run it."""

from pathlib import Path

from .models import Song
from .registry import get_importer
from .slides import Slide, SlideSettings


def import_song_from_file(path: str | Path) -> Song:
    """Import the song stored at *path*.

    Without a ``#title:`` tag the song is titled after the file stem.

    Raises UnknownFileExtensionError, SongFileNotFoundError or NoContentError.
    """
    return get_importer(path).import_file(path)


def create_presentation_from_file(
    path: str | Path, settings: SlideSettings | None = None
) -> list[Slide]:
    """Return the presentation slides for the song stored at *path*.

    Raises UnknownFileExtensionError or SongFileNotFoundError.
    """
    return get_importer(path).slides_from_file(path, settings or SlideSettings())
