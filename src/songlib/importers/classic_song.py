"""Importer for the classic song format (``.song``).

The format is plain text, stanzas separated by blank lines::

    #title: Amazing Grace
    #author: John Newton

    Amazing grace, how sweet the sound
    that saved a wretch like me.
    ---
    Text shown as the secondary track

    I once was lost, but now am found,
    was blind, but now I see.

A stanza whose first line starts with ``#`` is a metadata stanza holding
``#key: value`` lines.  Any other stanza is lyrics.  A ``---`` line inside a
lyrics stanza moves the remaining lines to the secondary (spoiler) track;
only the slide pipeline uses it.

Two independent passes read this format:

  - :func:`parse_song` builds a :class:`~songlib.models.Song` and guesses
    the chorus from repeated stanzas.
  - :func:`assemble_blocks` splits the text into parallel main/secondary
    stanza lists for :func:`generate_slides`.
"""

import logging
from enum import Enum, auto

from ..exceptions import NoContentError
from ..filetypes import FileType
from ..models import (
    Song,
    SongPartContent,
    SongPartContentType,
    SongPartType,
)
from ..slides import Slide, SlideSettings, build_slides
from .base import SongImporter
from .metadata import parse_metadata_block

logger = logging.getLogger(__name__)

SECONDARY_DELIMITER = "---"


# ---------------------------------------------------------------------------
# Song document
# ---------------------------------------------------------------------------


def split_blocks(content: str) -> list[str]:
    """Split *content* into blocks of trimmed lines separated by blank lines."""
    blocks: list[str] = []
    current: list[str] = []
    for line in content.strip().splitlines():
        stripped = line.strip()
        if stripped:
            current.append(stripped)
        elif current:
            blocks.append("\n".join(current))
            current = []
    if current:
        blocks.append("\n".join(current))
    return blocks


def parse_song(content: str) -> Song:
    """Parse classic song text into a :class:`~songlib.models.Song`.

    Part types are guessed from the structure: every lyrics stanza becomes a
    verse, and a stanza repeating an earlier one (ignoring case) turns the
    most recent matching part into ``chorus.1`` instead of being added again.

    The title stays empty unless a ``#title:`` tag sets it.

    Raises :class:`~songlib.exceptions.NoContentError` on blank input.
    """
    if not content.strip():
        raise NoContentError()

    song = Song()
    for block in split_blocks(content):
        if block.startswith("#"):
            _apply_tag_block(song, block)
        else:
            _apply_content_block(song, block)
    return song


def _apply_tag_block(song: Song, block: str) -> None:
    for key, value in parse_metadata_block(block).items():
        song.add_tag(key, value)
        if key == "title":
            song.title = value


def _apply_content_block(song: Song, block: str) -> None:
    matches = song.find_content_in_part(block)
    if matches:
        index = matches[-1]
        logger.debug("Repeated stanza found, promoting part %s to chorus", song.parts[index].id)
        song.retype_part(index, SongPartType.CHORUS, 1)
        return

    index = song.add_part_of_type(SongPartType.VERSE)
    song.parts[index].add_content(
        SongPartContent(voice_type=SongPartContentType.lyrics(), content=block)
    )
    logger.debug("Added %s", song.parts[index].id)


# ---------------------------------------------------------------------------
# Slide blocks
# ---------------------------------------------------------------------------


class BlockState(Enum):
    AWAITING_BLOCK = auto()  # before the first line of a stanza
    META = auto()  # inside a #key: value stanza
    MAIN = auto()  # inside a lyrics stanza, writing the main track
    SECONDARY = auto()  # inside a lyrics stanza, after the --- delimiter


def assemble_blocks(
    content: str, backup_title: str
) -> tuple[list[list[str]], list[list[str]], dict[str, str]]:
    """Split *content* into ``(blocks, secondary_blocks, metadata)``.

    ``blocks`` and ``secondary_blocks`` are parallel lists with one entry per
    lyrics stanza; each entry is the stanza's lines for that track (the
    secondary entry is empty when the stanza has no ``---`` delimiter).
    Stanzas with no main-track lines are dropped from both lists.

    ``metadata`` merges every metadata stanza (last duplicate key wins).  A
    missing ``title`` is filled in with *backup_title*.
    """
    blocks: list[list[str]] = []
    secondary_blocks: list[list[str]] = []
    metadata: dict[str, str] = {}

    state = BlockState.AWAITING_BLOCK
    main: list[str] = []
    secondary: list[str] = []

    def finish_stanza() -> None:
        if state is BlockState.META:
            metadata.update(parse_metadata_block("\n".join(main)))
        elif state is not BlockState.AWAITING_BLOCK and main:
            blocks.append(list(main))
            secondary_blocks.append(list(secondary))
        main.clear()
        secondary.clear()

    for line in content.strip().splitlines():
        stripped = line.strip()

        if not stripped:
            finish_stanza()
            state = BlockState.AWAITING_BLOCK
            continue

        if state is BlockState.AWAITING_BLOCK:
            state = BlockState.META if stripped.startswith("#") else BlockState.MAIN

        if state is BlockState.META:
            main.append(stripped)
        elif state is BlockState.MAIN:
            if stripped == SECONDARY_DELIMITER:
                state = BlockState.SECONDARY
            else:
                main.append(stripped)
        elif stripped != SECONDARY_DELIMITER:
            secondary.append(stripped)

    finish_stanza()

    metadata.setdefault("title", backup_title)
    return blocks, secondary_blocks, metadata


def generate_slides(content: str, settings: SlideSettings, backup_title: str) -> list[Slide]:
    """Return presentation slides for classic song text.

    Blank input yields no content slides (only the trailing empty slide, if
    enabled, and the title slide, if enabled).
    """
    blocks, secondary_blocks, metadata = assemble_blocks(content, backup_title)
    logger.debug("Assembled %d stanzas for %r", len(blocks), metadata["title"])
    return build_slides(blocks, secondary_blocks, metadata, settings, backup_title)


class ClassicSongImporter(SongImporter):
    """Importer for classic ``.song`` files."""

    file_types = (FileType.CLASSIC_SONG,)

    def import_song(self, content: str) -> Song:
        return parse_song(content)

    def generate_slides(
        self, content: str, settings: SlideSettings, backup_title: str
    ) -> list[Slide]:
        return generate_slides(content, settings, backup_title)
