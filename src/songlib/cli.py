import json
import logging
import sys
from dataclasses import replace

import click

from .config import load_slide_settings
from .exceptions import (
    ConfigError,
    NoContentError,
    SongFileNotFoundError,
    SongFileReadError,
    UnknownFileExtensionError,
)
from .models import Song
from .presentation import create_presentation_from_file, import_song_from_file
from .slides import MetaDisplayPolicy, SlideSettings


def _song_to_dict(song: Song) -> dict:
    return {
        "title": song.title,
        "tags": dict(song.tags),
        "parts": [
            {
                "id": str(part.id),
                "type": part.part_type.value,
                "number": part.number,
                "is_repetition_of": part.is_repetition_of,
                "contents": [
                    {"voice_type": str(c.voice_type), "content": c.content}
                    for c in part.contents
                ],
            }
            for part in song.parts
        ],
    }


def _fail(exc: Exception) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Import classic song files and turn them into presentation slides."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
def parse(file: str) -> None:
    """Print the song structure of FILE as JSON."""
    try:
        song = import_song_from_file(file)
    except (
        UnknownFileExtensionError, SongFileNotFoundError, SongFileReadError, NoContentError
    ) as exc:
        _fail(exc)
    click.echo(json.dumps(_song_to_dict(song), indent=2, ensure_ascii=False))


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--config", "config_path", default=None, metavar="PATH",
              help="YAML file with slide settings; other options override it.")
@click.option("--title-slide/--no-title-slide", default=None,
              help="Start with a title slide.")
@click.option("--spoiler/--no-spoiler", default=None,
              help="Preview the next stanza on each slide.")
@click.option("--meta", type=click.Choice([p.value for p in MetaDisplayPolicy]), default=None,
              help="Content slides that show the meta text.")
@click.option("--meta-syntax", default=None, metavar="TEMPLATE",
              help="Meta text template, e.g. '{{title}} ({{author}})'.")
@click.option("--empty-last-slide/--no-empty-last-slide", default=None,
              help="End with an empty slide.")
@click.option("--max-lines", type=click.IntRange(min=1), default=None,
              help="Split stanzas longer than this many lines.")
def presentation(
    file: str,
    config_path: str | None,
    title_slide: bool | None,
    spoiler: bool | None,
    meta: str | None,
    meta_syntax: str | None,
    empty_last_slide: bool | None,
    max_lines: int | None,
) -> None:
    """Print the presentation slides of FILE as JSON."""
    # --- Resolve settings ---
    try:
        settings = load_slide_settings(config_path) if config_path else SlideSettings()
    except ConfigError as exc:
        _fail(exc)

    overrides = {
        "title_slide": title_slide,
        "show_spoiler": spoiler,
        "show_meta_information": MetaDisplayPolicy(meta) if meta else None,
        "meta_syntax": meta_syntax,
        "empty_last_slide": empty_last_slide,
        "max_lines": max_lines,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    # --- Generate ---
    try:
        slides = create_presentation_from_file(file, settings)
    except (UnknownFileExtensionError, SongFileNotFoundError, SongFileReadError) as exc:
        _fail(exc)

    click.echo(json.dumps([s.to_dict() for s in slides], indent=2, ensure_ascii=False))
