from anititle.title import Segment, tokenize
from anititle.title.tokenizer import normalize, split_words


def test_brackets_and_free_text():
    assert tokenize("[A] B (C) D") == (
        Segment("A", True), Segment("B"), Segment("C", True), Segment("D"),
    )


def test_fullwidth_brackets():
    assert tokenize("【A】 B（C）") == (Segment("A", True), Segment("B"), Segment("C", True))


def test_whitespace_collapsed():
    assert tokenize("  a \n  b　c ") == (Segment("a b c"),)
    assert normalize("x  [ y ]") == "x [ y ]"


def test_empty():
    assert tokenize("") == ()
    assert tokenize("[ ]( )") == ()


def test_split_words():
    assert split_words("HEVC_AAC×2") == ["HEVC", "AAC×2"]
    assert split_words("特典映像/") == ["特典映像"]
    assert split_words("x265.FLAC") == ["x265", "FLAC"]
