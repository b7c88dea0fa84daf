"""Song document model.

A :class:`Song` owns its parts in a flat list (the *arena*).  Parts refer to
each other by index into that list, never by object reference, so a part
marked as a repetition always points at an earlier slot.
"""

import copy
import re
from dataclasses import dataclass, field
from enum import Enum

_PART_ID_RE = re.compile(r"^([A-Za-z]+)\.(\d+)$")


class SongPartType(Enum):
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"
    INTRO = "intro"
    OUTRO = "outro"
    INTERLUDE = "interlude"
    INSTRUMENTAL = "instrumental"
    SOLO = "solo"
    PRE_CHORUS = "prechorus"
    POST_CHORUS = "postchorus"
    REFRAIN = "refrain"
    OTHER = "other"

    @classmethod
    def from_string(cls, name: str) -> "SongPartType":
        """Return the part type for *name* (case-insensitive), OTHER if unknown."""
        key = name.strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER

    @property
    def is_repeatable(self) -> bool:
        """Whether the part may recur in a song with all of its contents."""
        return self in _REPEATABLE


_REPEATABLE = frozenset(
    {
        SongPartType.CHORUS,
        SongPartType.PRE_CHORUS,
        SongPartType.POST_CHORUS,
        SongPartType.REFRAIN,
    }
)


class VoiceType(Enum):
    LEAD_VOICE = "LeadVoice"
    SOPRANO_VOICE = "SopranoVoice"
    ALTO_VOICE = "AltoVoice"
    TENOR_VOICE = "TenorVoice"
    BASS_VOICE = "BassVoice"
    INSTRUMENTAL = "Instrumental"
    SOLO = "Solo"
    CHORDS = "Chords"
    LYRICS = "Lyrics"


@dataclass(frozen=True)
class SongPartContentType:
    """The kind of content a part carries.

    ``language`` is only meaningful for lyrics; ``None`` is the default language.
    """

    voice: VoiceType
    language: str | None = None

    @classmethod
    def lyrics(cls, language: str | None = None) -> "SongPartContentType":
        return cls(VoiceType.LYRICS, language)

    @property
    def is_lyrics(self) -> bool:
        return self.voice is VoiceType.LYRICS

    def __str__(self) -> str:
        if self.is_lyrics and self.language:
            return f"Lyrics ({self.language})"
        return self.voice.value


@dataclass
class SongPartContent:
    voice_type: SongPartContentType
    content: str


@dataclass(frozen=True)
class SongPartId:
    """Identifier of a part in the form ``<type>.<number>``, e.g. ``verse.1``.

    Ids are meant to be unique inside a song, but :class:`Song` does not
    reject duplicates; see :meth:`Song.has_unique_part_ids`.
    """

    value: str

    def __post_init__(self):
        if not _PART_ID_RE.match(self.value):
            raise ValueError(f"Invalid song part id: {self.value!r}")

    @classmethod
    def parse(cls, value: str) -> "SongPartId | None":
        """Return a :class:`SongPartId` or ``None`` if *value* is malformed."""
        if not _PART_ID_RE.match(value):
            return None
        return cls(value)

    @classmethod
    def for_part(cls, part_type: SongPartType, number: int) -> "SongPartId":
        return cls(f"{part_type.value}.{number}")

    @property
    def part_type(self) -> SongPartType:
        return SongPartType.from_string(_PART_ID_RE.match(self.value).group(1))

    @property
    def number(self) -> int:
        return int(_PART_ID_RE.match(self.value).group(2))

    def __str__(self) -> str:
        return self.value


@dataclass
class SongPart:
    """A part of a song (verse, chorus, ...) holding one or more voices."""

    id: SongPartId
    part_type: SongPartType
    number: int
    contents: list[SongPartContent] = field(default_factory=list)
    is_repetition_of: int | None = None  # arena index of an earlier part

    @classmethod
    def from_id(cls, part_id: SongPartId) -> "SongPart":
        return cls(id=part_id, part_type=part_id.part_type, number=part_id.number)

    def add_content(self, content: SongPartContent) -> None:
        self.contents.append(content)

    def get_content(self, voice_type: SongPartContentType) -> SongPartContent | None:
        return next((c for c in self.contents if c.voice_type == voice_type), None)

    def has_lyrics(self) -> bool:
        return any(c.voice_type.is_lyrics for c in self.contents)

    @property
    def is_repeatable(self) -> bool:
        return self.part_type.is_repeatable

    def set_type(self, part_type: SongPartType, number: int) -> None:
        """Change the part's type and number and re-derive its id."""
        self.part_type = part_type
        self.number = number
        self.id = SongPartId.for_part(part_type, number)


@dataclass
class Song:
    """Canonical representation of a song document."""

    title: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    parts: list[SongPart] = field(default_factory=list)

    # --- Tags ---

    def add_tag(self, key: str, value: str) -> None:
        """Set a tag; an existing value for *key* is overwritten."""
        self.tags[key] = value

    def get_tag(self, key: str) -> str | None:
        return self.tags.get(key)

    # --- Parts ---

    def add_part(self, part: SongPart, repetition_of: int | None = None) -> int:
        """Append *part* and return its index.

        *repetition_of* must be the index of a part added earlier.
        """
        if repetition_of is not None:
            if not 0 <= repetition_of < len(self.parts):
                raise ValueError(
                    f"Repetition must refer to an earlier part, got index {repetition_of}"
                )
            part.is_repetition_of = repetition_of
        self.parts.append(part)
        return len(self.parts) - 1

    def add_part_of_type(self, part_type: SongPartType, number: int | None = None) -> int:
        """Create an empty part of *part_type* and return its index.

        Without an explicit *number* the part is numbered after the parts of
        the same type already in the song.
        """
        if number is None:
            number = self.get_part_count(part_type) + 1
        part = SongPart(
            id=SongPartId.for_part(part_type, number), part_type=part_type, number=number
        )
        return self.add_part(part)

    def retype_part(self, index: int, part_type: SongPartType, number: int) -> None:
        self.parts[index].set_type(part_type, number)

    def get_part_count(self, part_type: SongPartType) -> int:
        return sum(1 for part in self.parts if part.part_type is part_type)

    def get_total_part_count(self) -> int:
        return len(self.parts)

    def get_parts_by_type(self, part_type: SongPartType) -> list[SongPart]:
        return [part for part in self.parts if part.part_type is part_type]

    def get_part_by_id(self, part_id: str) -> SongPart | None:
        """Return the first part whose id equals *part_id*."""
        return next((part for part in self.parts if part.id.value == part_id), None)

    def get_repetition_source(self, index: int) -> SongPart | None:
        source = self.parts[index].is_repetition_of
        return None if source is None else self.parts[source]

    def get_content_types(self) -> list[SongPartContentType]:
        """Return every content type used in the song, in order of first use."""
        seen: list[SongPartContentType] = []
        for part in self.parts:
            for content in part.contents:
                if content.voice_type not in seen:
                    seen.append(content.voice_type)
        return seen

    def find_content_in_part(self, text: str) -> list[int]:
        """Return indices of parts holding content equal to *text*.

        Comparison is exact apart from case.  A part is listed once per
        matching content item.
        """
        needle = text.lower()
        return [
            index
            for index, part in enumerate(self.parts)
            for content in part.contents
            if content.content.lower() == needle
        ]

    def find_first_content_in_part(self, text: str) -> int | None:
        matches = self.find_content_in_part(text)
        return matches[0] if matches else None

    def get_unpacked_parts(self) -> list[SongPart]:
        """Return copies of all parts; changes to them do not affect the song."""
        return copy.deepcopy(self.parts)

    def has_unique_part_ids(self) -> bool:
        ids = [part.id for part in self.parts]
        return len(ids) == len(set(ids))
