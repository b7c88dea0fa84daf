"""Slide settings files.

Settings are stored as a flat YAML mapping whose keys are the fields of
:class:`~songlib.slides.SlideSettings`; omitted keys keep their defaults::

    title_slide: true
    show_spoiler: false
    show_meta_information: last      # none | first | last | both
    meta_syntax: "{{title}} ({{author}})"
    empty_last_slide: true
    max_lines: 4                     # or null to disable wrapping
"""

from dataclasses import fields
from pathlib import Path

import yaml

from .exceptions import ConfigError
from .slides import MetaDisplayPolicy, SlideSettings

_BOOL_KEYS = {"title_slide", "show_spoiler", "empty_last_slide"}


def load_slide_settings(path: str | Path) -> SlideSettings:
    """Load :class:`SlideSettings` from the YAML file at *path*.

    Raises :class:`~songlib.exceptions.ConfigError` if the file cannot be
    read, is not a YAML mapping, or holds unknown keys or invalid values.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file: {exc}", str(path)) from exc

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML syntax in settings file: {exc}", str(path)) from exc

    if raw is None:
        return SlideSettings()
    if not isinstance(raw, dict):
        raise ConfigError("Settings file must contain a YAML mapping", str(path))

    return settings_from_mapping(raw, str(path))


def settings_from_mapping(raw: dict, path: str | None = None) -> SlideSettings:
    """Build :class:`SlideSettings` from a plain mapping, validating every value."""
    known = {f.name for f in fields(SlideSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}", path)

    values = {}
    for key, value in raw.items():
        if key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(f"'{key}' must be true or false", path)
        elif key == "show_meta_information":
            value = _parse_policy(value, path)
        elif key == "meta_syntax":
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ConfigError("'meta_syntax' must be a string", path)
        elif key == "max_lines":
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value < 1
            ):
                raise ConfigError("'max_lines' must be a positive integer or null", path)
        values[key] = value

    return SlideSettings(**values)


def _parse_policy(value, path: str | None) -> MetaDisplayPolicy:
    if isinstance(value, str):
        try:
            return MetaDisplayPolicy(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(p.value for p in MetaDisplayPolicy)
    raise ConfigError(f"'show_meta_information' must be one of: {choices}", path)
