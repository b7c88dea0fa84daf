from songlib.filetypes import (
    FileType,
    contains_presentation_order,
    contains_song_structure,
    get_file_type_by_file_ending,
)


def test_contains_song_structure():
    assert contains_song_structure(FileType.CCLI_SONGSELECT)
    assert contains_song_structure(FileType.CSSF)
    assert not contains_song_structure(FileType.CLASSIC_SONG)


def test_contains_presentation_order():
    assert contains_presentation_order(FileType.CLASSIC_SONG)
    assert contains_presentation_order(FileType.CSSF)
    assert not contains_presentation_order(FileType.CCLI_SONGSELECT)


def test_file_type_by_ending():
    assert get_file_type_by_file_ending(".song") == FileType.CLASSIC_SONG
    assert get_file_type_by_file_ending("CSSF") == FileType.CSSF
    assert get_file_type_by_file_ending(".ccli") == FileType.CCLI_SONGSELECT
    assert get_file_type_by_file_ending(".txt") is None
