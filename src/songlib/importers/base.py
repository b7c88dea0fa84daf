from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import SongFileNotFoundError, SongFileReadError
from ..filetypes import FileType, get_file_type_by_file_ending
from ..models import Song
from ..slides import Slide, SlideSettings
from .metadata import get_filename_without_extension


class SongImporter(ABC):
    """Abstract base class for all song file format importers."""

    #: File formats handled by the importer.
    file_types: tuple[FileType, ...] = ()

    @classmethod
    def can_handle(cls, path: str | Path) -> bool:
        """Return True if this importer can handle the file at *path*."""
        suffix = Path(path).suffix
        return bool(suffix) and get_file_type_by_file_ending(suffix) in cls.file_types

    @abstractmethod
    def import_song(self, content: str) -> Song:
        """Parse *content* and return a canonical Song.

        Raises NoContentError if there is nothing to import.
        """

    @abstractmethod
    def generate_slides(
        self, content: str, settings: SlideSettings, backup_title: str
    ) -> list[Slide]:
        """Return presentation slides for *content*.

        *backup_title* is used when the content does not set a title.
        """

    def read(self, path: str | Path) -> str:
        """Return the text of the song file at *path*.

        Raises SongFileNotFoundError if there is no such file and
        SongFileReadError if it cannot be read or is not valid UTF-8.
        """
        path = Path(path)
        if not path.is_file():
            raise SongFileNotFoundError(str(path))
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SongFileReadError(str(path), str(exc)) from exc

    def import_file(self, path: str | Path) -> Song:
        """Convenience method: read + import_song."""
        song = self.import_song(self.read(path))
        if not song.title:
            song.title = _backup_title(path)
        return song

    def slides_from_file(self, path: str | Path, settings: SlideSettings) -> list[Slide]:
        """Convenience method: read + generate_slides, titled after the file stem."""
        return self.generate_slides(self.read(path), settings, _backup_title(path))


def _backup_title(path: str | Path) -> str:
    return get_filename_without_extension(str(path)) or ""
