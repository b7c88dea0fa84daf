import pytest

from songlib.exceptions import TemplateRenderError
from songlib.templating import render_metadata

METADATA = {"title": "Amazing Grace", "author": "John Newton"}


def test_render_metadata():
    assert render_metadata("{{title}} ({{author}})", METADATA) == "Amazing Grace (John Newton)"


def test_missing_key_renders_empty():
    assert render_metadata("{{title}} ({{nonexisting}})", METADATA) == "Amazing Grace ()"


def test_plain_template():
    assert render_metadata("no tags here", METADATA) == "no tags here"


def test_unclosed_tag_raises():
    with pytest.raises(TemplateRenderError) as exc_info:
        render_metadata("{{title", METADATA)
    assert exc_info.value.template == "{{title"
