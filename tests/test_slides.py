import pytest

from songlib.importers.classic_song import generate_slides
from songlib.slides import (
    ContentSlide,
    EmptySlide,
    MetaDisplayPolicy,
    MultiLanguageContentSlide,
    PictureSlide,
    SlideSettings,
    TitleSlide,
    build_slides,
)

SONG = "#title: Test\n#author: Someone\n\nVerse one\n\nChorus\n\nVerse two"


def _settings(**kwargs) -> SlideSettings:
    defaults = dict(meta_syntax="{{title}} ({{author}})")
    defaults.update(kwargs)
    return SlideSettings(**defaults)


def _content(slides) -> list[ContentSlide]:
    return [s for s in slides if isinstance(s, ContentSlide)]


# ---------------------------------------------------------------------------
# Slide types
# ---------------------------------------------------------------------------


def test_content_slide_normalises_blank_texts():
    slide = ContentSlide(main_text="Test", spoiler_text="", meta_text="  ")
    assert slide.spoiler_text is None
    assert slide.meta_text is None
    assert not slide.has_spoiler()


def test_content_slide_has_spoiler():
    assert ContentSlide(main_text="Test", spoiler_text="Hallo").has_spoiler()


def test_other_slides_have_no_spoiler():
    assert not TitleSlide(title_text="T").has_spoiler()
    assert not EmptySlide().has_spoiler()
    assert not PictureSlide(picture_path="a.png").has_spoiler()


def test_multi_language_slide_spoiler():
    assert MultiLanguageContentSlide(main_text_list=["a"], spoiler_text_list=["b"]).has_spoiler()
    assert not MultiLanguageContentSlide(main_text_list=["a"]).has_spoiler()


def test_to_dict_includes_kind():
    assert EmptySlide(black_background=True).to_dict() == {
        "kind": "empty",
        "black_background": True,
    }
    assert TitleSlide(title_text="T").to_dict() == {
        "kind": "title",
        "title_text": "T",
        "meta_text": None,
    }


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def test_default_structure():
    slides = generate_slides(SONG, _settings(), "backup")
    assert isinstance(slides[0], TitleSlide)
    assert slides[0].title_text == "Test"
    assert [s.main_text for s in slides[1:4]] == ["Verse one", "Chorus", "Verse two"]
    assert isinstance(slides[-1], EmptySlide)
    assert len(slides) == 5


def test_no_title_and_no_empty_slide():
    slides = generate_slides(SONG, _settings(title_slide=False, empty_last_slide=False), "x")
    assert len(slides) == 3
    assert all(isinstance(s, ContentSlide) for s in slides)


def test_title_slide_uses_backup_title():
    slides = generate_slides("Only lyrics", _settings(), "File Name")
    assert slides[0].title_text == "File Name"


def test_multi_line_main_text():
    slides = generate_slides("line one\nline two", _settings(title_slide=False), "x")
    assert slides[0].main_text == "line one\nline two"


def test_empty_input_has_no_content_slides():
    slides = generate_slides("", _settings(title_slide=False), "x")
    assert slides == [EmptySlide(black_background=False)]


def test_empty_input_without_empty_slide():
    assert generate_slides("", _settings(title_slide=False, empty_last_slide=False), "x") == []


# ---------------------------------------------------------------------------
# Spoilers
# ---------------------------------------------------------------------------


def test_spoiler_previews_next_stanza():
    content = _content(generate_slides(SONG, _settings(), "x"))
    assert content[0].spoiler_text == "Chorus"
    assert content[1].spoiler_text == "Verse two"
    assert content[2].spoiler_text is None


def test_spoiler_disabled():
    content = _content(generate_slides(SONG, _settings(show_spoiler=False), "x"))
    assert all(s.spoiler_text is None for s in content)


def test_secondary_track_used_as_spoiler():
    text = "main a\n---\nsecond a\n\nmain b"
    content = _content(generate_slides(text, _settings(), "x"))
    assert content[0].main_text == "main a"
    assert content[0].spoiler_text == "second a"
    assert content[1].spoiler_text is None


def test_secondary_track_kept_when_spoiler_disabled():
    text = "main a\n---\nsecond a\n\nmain b"
    content = _content(generate_slides(text, _settings(show_spoiler=False), "x"))
    assert content[0].spoiler_text == "second a"


# ---------------------------------------------------------------------------
# Meta text
# ---------------------------------------------------------------------------


def _meta_flags(slides) -> list[bool]:
    return [getattr(s, "meta_text", None) is not None for s in slides]


def test_meta_on_first_slide_only():
    slides = generate_slides(
        SONG, _settings(show_meta_information=MetaDisplayPolicy.FIRST_SLIDE), "x"
    )
    assert _meta_flags(slides) == [False, True, False, False, False]
    assert slides[1].meta_text == "Test (Someone)"


def test_meta_on_last_slide_only():
    slides = generate_slides(
        SONG, _settings(show_meta_information=MetaDisplayPolicy.LAST_SLIDE), "x"
    )
    assert _meta_flags(slides) == [False, False, False, True, False]


def test_meta_on_first_and_last_slide():
    slides = generate_slides(SONG, _settings(), "x")
    assert _meta_flags(slides) == [False, True, False, True, False]


def test_meta_disabled():
    slides = generate_slides(SONG, _settings(show_meta_information=MetaDisplayPolicy.NONE), "x")
    assert not any(_meta_flags(slides))


def test_meta_single_stanza_is_first_and_last():
    slides = generate_slides(
        "Only", _settings(title_slide=False, show_meta_information=MetaDisplayPolicy.LAST_SLIDE), "x"
    )
    assert slides[0].meta_text == "x ()"


def test_meta_on_title_slide_when_no_stanzas():
    slides = generate_slides("#title: Empty", _settings(), "x")
    assert slides[0].meta_text == "Empty ()"


def test_meta_uses_backup_title():
    slides = generate_slides("verse", _settings(meta_syntax="{{title}}"), "From File")
    assert slides[1].meta_text == "From File"


def test_empty_template_gives_no_meta():
    slides = generate_slides(SONG, _settings(meta_syntax=""), "x")
    assert not any(_meta_flags(slides))


def test_template_rendering_to_blank_gives_no_meta():
    slides = generate_slides(SONG, _settings(meta_syntax="{{missing}} "), "x")
    assert not any(_meta_flags(slides))


def test_broken_template_is_ignored(caplog):
    slides = generate_slides(SONG, _settings(meta_syntax="{{title"), "x")
    assert not any(_meta_flags(slides))
    assert len(_content(slides)) == 3
    assert "Meta text disabled" in caplog.text


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------


def test_max_lines_splits_long_stanzas():
    text = "1\n2\n3\n4\n5\n6\n---\na\nb\nc\nd"
    content = _content(
        generate_slides(text, _settings(title_slide=False, max_lines=4), "x")
    )
    assert [s.main_text for s in content] == ["1\n2\n3", "4\n5\n6"]
    assert [s.spoiler_text for s in content] == ["a\nb\nc", "d"]


def test_max_lines_then_lookahead_spoiler():
    text = "1\n2\n3\n4"
    content = _content(
        generate_slides(text, _settings(title_slide=False, max_lines=3), "x")
    )
    assert [s.main_text for s in content] == ["1\n2", "3\n4"]
    assert content[0].spoiler_text == "3\n4"


def test_build_slides_directly():
    slides = build_slides(
        [["a"], ["b"]],
        [[], []],
        {"title": "T"},
        SlideSettings(empty_last_slide=False),
        "backup",
    )
    assert slides == [
        TitleSlide(title_text="T"),
        ContentSlide(main_text="a", spoiler_text="b"),
        ContentSlide(main_text="b"),
    ]


def test_zero_max_lines_is_rejected():
    with pytest.raises(ValueError):
        generate_slides("a\nb", _settings(max_lines=0), "x")
