"""Metadata templating.

Templates use mustache syntax (``{{title}} ({{author}})``) and are rendered
with :mod:`chevron`.  Unknown keys render as empty strings.
"""

import chevron

from .exceptions import TemplateRenderError


def render_metadata(template: str, metadata: dict[str, str]) -> str:
    """Render *template* against *metadata*.

    Raises :class:`~songlib.exceptions.TemplateRenderError` if the template
    is malformed (e.g. an unclosed tag).
    """
    try:
        return chevron.render(template, metadata)
    except chevron.ChevronError as exc:
        raise TemplateRenderError(template, str(exc)) from exc
