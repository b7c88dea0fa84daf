"""Presentation slides.

Turns assembled song blocks into an ordered list of slides:

  1. optional title slide
  2. one content slide per stanza, with a spoiler (the stanza's secondary
     text, or a preview of the next stanza)
  3. optional trailing empty slide

Meta text (rendered from the song's metadata with
:func:`~songlib.templating.render_metadata`) is attached to the first and/or
last content slide depending on :class:`MetaDisplayPolicy`.
"""

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum

from .exceptions import TemplateRenderError
from .templating import render_metadata
from .wrap import wrap_blocks

logger = logging.getLogger(__name__)


def _none_if_blank(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return text


# ---------------------------------------------------------------------------
# Slide types
# ---------------------------------------------------------------------------


class Slide:
    """Base class of all slide types."""

    kind = "slide"

    def has_spoiler(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"kind": self.kind, **asdict(self)}


@dataclass
class TitleSlide(Slide):
    kind = "title"

    title_text: str
    meta_text: str | None = None

    def __post_init__(self):
        self.meta_text = _none_if_blank(self.meta_text)


@dataclass
class ContentSlide(Slide):
    """A slide with a main text, an optional spoiler and optional meta text."""

    kind = "content"

    main_text: str
    spoiler_text: str | None = None
    meta_text: str | None = None

    def __post_init__(self):
        self.spoiler_text = _none_if_blank(self.spoiler_text)
        self.meta_text = _none_if_blank(self.meta_text)

    def has_spoiler(self) -> bool:
        return self.spoiler_text is not None


@dataclass
class MultiLanguageContentSlide(Slide):
    kind = "multi_language_content"

    main_text_list: list[str]
    spoiler_text_list: list[str] = field(default_factory=list)
    meta_text: str | None = None

    def __post_init__(self):
        self.meta_text = _none_if_blank(self.meta_text)

    def has_spoiler(self) -> bool:
        return len(self.spoiler_text_list) > 0


@dataclass
class PictureSlide(Slide):
    kind = "picture"

    picture_path: str


@dataclass
class EmptySlide(Slide):
    kind = "empty"

    black_background: bool = False


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class MetaDisplayPolicy(Enum):
    NONE = "none"
    FIRST_SLIDE = "first"
    LAST_SLIDE = "last"
    FIRST_AND_LAST_SLIDE = "both"

    @property
    def on_first(self) -> bool:
        return self in (MetaDisplayPolicy.FIRST_SLIDE, MetaDisplayPolicy.FIRST_AND_LAST_SLIDE)

    @property
    def on_last(self) -> bool:
        return self in (MetaDisplayPolicy.LAST_SLIDE, MetaDisplayPolicy.FIRST_AND_LAST_SLIDE)


@dataclass
class SlideSettings:
    """What a generated presentation contains (not how it looks)."""

    title_slide: bool = True
    show_spoiler: bool = True
    show_meta_information: MetaDisplayPolicy = MetaDisplayPolicy.FIRST_AND_LAST_SLIDE
    meta_syntax: str = ""
    empty_last_slide: bool = True
    max_lines: int | None = None  # None disables line wrapping


# ---------------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------------


def build_slides(
    blocks: list[list[str]],
    secondary_blocks: list[list[str]],
    metadata: dict[str, str],
    settings: SlideSettings,
    backup_title: str,
) -> list[Slide]:
    """Return the slides for one song.

    *blocks* and *secondary_blocks* are parallel lists of stanzas (lists of
    lines) as produced by
    :func:`~songlib.importers.classic_song.assemble_blocks`.
    """
    if settings.max_lines is not None:
        blocks, secondary_blocks = wrap_blocks([blocks, secondary_blocks], settings.max_lines)

    meta_text = _render_meta_text(settings.meta_syntax, metadata)
    policy = settings.show_meta_information
    slides: list[Slide] = []

    if settings.title_slide:
        title = metadata.get("title") or backup_title
        # With no stanzas the title slide is the only place to show meta text
        show_meta = not blocks and policy is not MetaDisplayPolicy.NONE
        slides.append(TitleSlide(title_text=title, meta_text=meta_text if show_meta else None))

    last = len(blocks) - 1
    for i, block in enumerate(blocks):
        if secondary_blocks[i]:
            spoiler = "\n".join(secondary_blocks[i])
        elif settings.show_spoiler and i < last:
            spoiler = "\n".join(blocks[i + 1])
        else:
            spoiler = None

        show_meta = (i == 0 and policy.on_first) or (i == last and policy.on_last)
        slides.append(
            ContentSlide(
                main_text="\n".join(block),
                spoiler_text=spoiler,
                meta_text=meta_text if show_meta else None,
            )
        )

    if settings.empty_last_slide:
        slides.append(EmptySlide(black_background=False))

    return slides


def _render_meta_text(template: str, metadata: dict[str, str]) -> str | None:
    if not template:
        return None
    try:
        rendered = render_metadata(template, metadata)
    except TemplateRenderError as exc:
        logger.warning("Meta text disabled: %s", exc)
        return None
    return _none_if_blank(rendered)
