import pytest

from anititle.title import SubtitleLanguage, parse, tokenize
from anititle.title.subtitle import collect_positive, extract_subtitle_languages, has_negative_marker


def _langs(title: str) -> str:
    return parse(title).subtitle_languages_text


@pytest.mark.parametrize("title, expected", [
    ("[Group] Title - 01 [简日双语][1080p]", "CHS, JPN"),
    ("[Group] Title - 01 [CHS_CHT][1080p]", "CHS, CHT"),
    ("[Group] Title - 01 [繁中字幕]", "CHT"),
    ("[Group] Title - 01 [简体中文]", "CHS"),
    ("[Group] Title - 01 [中日双语]", "CHS, JPN"),
    ("[Group] Title - 01 [ENG]", "ENG"),
    ("[Group][Title][01][GB][1080P]", "CHS"),
    ("[Nekomoe kissaten][Title][01-12][1080p][JPSC]", "CHS, JPN"),
    ("Title - 01 简日双语 [1080p]", "CHS, JPN"),
])
def test_positive_tags(title, expected):
    assert _langs(title) == expected


def test_compound_without_suffix_only_in_brackets():
    assert _langs("[Group] 中 日 - 01 [1080p]") == ""
    assert _langs("[Group] Title - 01 [简日]") == "CHS, JPN"


def test_negative_drops_whole_chinese_compound_tag():
    assert _langs("[Group] Title - 01 [简日内嵌][无中文字幕]") == ""
    assert _langs("[Group] Title - 01 [无字幕]") == ""
    assert _langs("[Group][Title][01][JPSC][无中文字幕]") == ""


def test_negative_keeps_standalone_japanese_and_english():
    assert _langs("[Group] Title - 01 [简日内嵌][JPN][无中文字幕]") == "JPN"
    assert _langs("[Group] Title - 01 [ENG][简繁内封][无中文字幕]") == "ENG"


def test_negative_applies_regardless_of_position():
    before = tokenize("[无中文字幕][Group] Title - 01 [简繁内封]")
    after = tokenize("[Group] Title - 01 [简繁内封][无中文字幕]")
    assert collect_positive(before) == {SubtitleLanguage.CHS, SubtitleLanguage.CHT}
    assert has_negative_marker(before) and has_negative_marker(after)
    assert extract_subtitle_languages(before) == frozenset()
    assert extract_subtitle_languages(after) == frozenset()


def test_rendered_in_code_order_and_deduplicated():
    r = parse("[Group] Title - 01 [JPN][CHT][简繁日内封][CHS]")
    assert r.subtitle_languages_text == "CHS, CHT, JPN"
    assert len(r.subtitle_languages) == 3
