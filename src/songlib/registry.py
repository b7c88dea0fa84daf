from pathlib import Path

from .exceptions import UnknownFileExtensionError
from .filetypes import get_file_type_by_file_ending
from .importers.base import SongImporter
from .importers.classic_song import ClassicSongImporter

_IMPORTERS: list[type[SongImporter]] = [
    ClassicSongImporter,
]


def get_importer(path: str | Path) -> SongImporter:
    """Return an instantiated importer for the file at *path*.

    Raises UnknownFileExtensionError if no importer matches; its ``supported``
    flag tells a declared but unimplemented format from an unknown one.
    """
    for cls in _IMPORTERS:
        if cls.can_handle(path):
            return cls()
    extension = Path(path).suffix
    known = bool(extension) and get_file_type_by_file_ending(extension) is not None
    raise UnknownFileExtensionError(extension, supported=known)
