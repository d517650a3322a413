import pytest

from anititle.title import EpisodeSort, Range, Season, SeasonSet, Single, Special, Unknown, parse, tokenize
from anititle.title.episode import (
    RULES,
    _chinese_num_to_int,
    has_special_marker,
    match_movie,
    match_season,
    match_season_episode,
    match_season_range,
    resolve_episode_range,
)


def _episode(title: str) -> str:
    return str(parse(title).episode_range)


@pytest.mark.parametrize("title, expected", [
    ("[Group] Title S2 - 05 [1080p]", "05..05"),
    ("[Group] Title S01E01-E12 [1080p]", "01..12"),
    ("[Group] 某动画 第1季第5话 [1080P]", "5..5"),
    ("Title Season 1 Episode 07 [720p]", "07..07"),
    ("[LoliHouse] Kusuriya no Hitorigoto 2nd Season - 05 [WebRip 1080p HEVC-10bit AAC][简繁内封字幕]", "05..05"),
    ("[Group] Title Season 2 - 05 [1080p]", "05..05"),
    ("[Group] 某动画 第二季 - 05 [1080P]", "05..05"),
    ("[Group] 某动画 第二期 EP05 [1080P]", "05..05"),
    ("[Group] Title 3rd Season EP12 [1080p]", "12..12"),
])
def test_season_episode(title, expected):
    assert _episode(title) == expected


@pytest.mark.parametrize("title, expected", [
    ("[Group] Title S1-3 [1080p]", "S1+S2+S3"),
    ("[Group] 某动画 第1-2季 [1080P]", "S1+S2"),
    # 倒序区间不视为季度区间，退化为单季
    ("[Group] Title S3-S1 [1080p]", "S3"),
])
def test_season_range(title, expected):
    assert _episode(title) == expected


@pytest.mark.parametrize("title, expected", [
    ("[Group] 某动画 第二季 [1080P]", "S2"),
    ("[Group] 某动画 第十二季 [1080P]", "S12"),
    ("Title Season 2 [1080p]", "S2"),
    ("Title 3rd Season [1080p]", "S3"),
    ("Title Season 1-2 [1080p]", "S1"),
    ("Title S03 [1080p]", "S3"),
])
def test_season(title, expected):
    assert _episode(title) == expected


@pytest.mark.parametrize("title, expected", [
    ("[Lilith-Raws] Sousou no Frieren - 05 [Baha][WEB-DL][1080p][AVC AAC][CHT][MP4]", "05..05"),
    ("[Nekomoe kissaten][Title][01-12][1080p][JPSC]", "01..12"),
    ("Title EP03 [720p]", "03..03"),
    ("[Group] 某动画 第07话 [1080P]", "07..07"),
    ("[Group] Title [12v2][1080p]", "12..12"),
    ("[Group] Title - 5 [1080p]", "5..5"),
    ("Title 07 [1080p]", "07..07"),
    ("Title 07-[1080p]", "07..07"),
])
def test_plain_episode(title, expected):
    assert _episode(title) == expected


@pytest.mark.parametrize("title", [
    "[Group] Title [2024][1080p]",
    "Title 07 [Fansub]",
])
def test_plain_episode_ignores_non_episode_numbers(title):
    assert _episode(title) == "S?"


@pytest.mark.parametrize("title, expected", [
    ("[Group] Title OVA 02 [1080p]", "SP02..SP02"),
    ("[Group] Title [SP01][1080p]", "SP01..SP01"),
    ("[Group] Title [OVA]", "S?"),
])
def test_special(title, expected):
    assert _episode(title) == expected


@pytest.mark.parametrize("title", [
    "[Group] 剧场版 某动画 [1080p]",
    "[Group] Title The Movie [BDRip]",
    "[Group] Title [Movie v3]",
])
def test_movie(title):
    assert parse(title).episode_range == Unknown()


def test_rule_order():
    assert [name for name, _ in RULES] == [
        "season_episode", "season_range", "season", "episode", "special", "movie",
    ]


def test_season_episode_beats_separate_signals():
    segments = tokenize("Title S2 05 [1080p]")
    assert match_season(segments) == Season(2)
    assert match_season_episode(segments) == Single(EpisodeSort("05"))
    assert str(resolve_episode_range(segments)) == "05..05"


def test_rules_are_independent():
    segments = tokenize("[Group] Title S1-S2 [Movie]")
    assert match_season_range(segments) == SeasonSet.expand(1, 2)
    assert match_movie(segments) == Unknown()
    assert isinstance(resolve_episode_range(segments), SeasonSet)


def test_result_types():
    assert isinstance(parse("[Group] Title - 01 [1080p]").episode_range, Single)
    assert isinstance(parse("[Group][Title][01-12][1080p]").episode_range, Range)
    assert isinstance(parse("[Group] Title [SP01]").episode_range, Special)


def test_special_marker_detection():
    assert has_special_marker(tokenize("特典映像/[Group] [01]"))
    assert has_special_marker(tokenize("[Group] Title [Extras]"))
    assert not has_special_marker(tokenize("[Group] Title - 01 [1080p]"))
    assert has_special_marker(tokenize("[Group] Title - 03 [SP][1080p]"))


@pytest.mark.parametrize("title", [
    "[Group] Extra Title - 05 [1080p]",
    "[Group] Special Agent - 05 [1080p]",
    "[Group][Extra Title][05][1080p]",
])
def test_marker_words_in_show_name_are_not_special(title):
    assert not has_special_marker(tokenize(title))
    assert _episode(title) == "05..05"


@pytest.mark.parametrize("text, expected", [
    ("二", 2), ("十", 10), ("十二", 12), ("二十", 20), ("二十三", 23), ("7", 7), ("百", None),
])
def test_chinese_num_to_int(text, expected):
    assert _chinese_num_to_int(text) == expected
