"""
字幕语言提取

两阶段：先在所有分段中收集正向标签（单语言标签、来源隐含语言、中日文复合标签），
再应用否定标签（如 "无中文字幕"）：凡含简繁中文的标签整体作废（如 [简繁日内封] 中的
日文一并丢弃），只保留独立的日/英标签（如 [JPN]）。否定标签与正向标签可同时出现，
无论先后，否定标签总是生效。
"""

import re
from typing import FrozenSet, Iterable, List, Sequence, Set

from .models import CHINESE_LANGUAGES, SubtitleLanguage
from .tokenizer import Segment, split_words

CHS = SubtitleLanguage.CHS
CHT = SubtitleLanguage.CHT
JPN = SubtitleLanguage.JPN
ENG = SubtitleLanguage.ENG

# 单语言标签 (大小写不敏感，整词匹配)
ASCII_TAGS = {
    'CHS': {CHS}, 'SC': {CHS}, 'GB': {CHS},
    'CHT': {CHT}, 'TC': {CHT}, 'BIG5': {CHT},
    'JPN': {JPN}, 'JP': {JPN},
    'ENG': {ENG},
    'JPSC': {JPN, CHS}, 'JPTC': {JPN, CHT},
    # 巴哈姆特动画疯源默认繁体中文
    'BAHA': {CHT},
}

# 中日文复合标签: [简繁日内封] [简日双语] [繁中字幕] [简体中文]
COMPOUND_TAG_RE = re.compile(
    r'^(?P<langs>(?:[简繁中日英][体體文语語]?){1,4})'
    r'(?P<suffix>(?:[双雙多][语語]|[内內][封嵌]|外[挂掛]|硬字幕?|软字幕?|字幕)*)$'
)

_LANGUAGE_CHARS = {'简': CHS, '繁': CHT, '日': JPN, '英': ENG}

NEGATIVE_RE = re.compile(r'[无無]中文字幕|[无無]字幕|生肉')


def _languages_from_compound(langs: str) -> Set[SubtitleLanguage]:
    result = {_LANGUAGE_CHARS[c] for c in langs if c in _LANGUAGE_CHARS}
    # "中" 仅在未出现简/繁时视为简体
    if '中' in langs and not result & CHINESE_LANGUAGES:
        result.add(CHS)
    return result


def _languages_from_word(word: str, bracketed: bool) -> Set[SubtitleLanguage]:
    tag = ASCII_TAGS.get(word.upper())
    if tag:
        return set(tag)
    m = COMPOUND_TAG_RE.match(word)
    # 不带字幕后缀的复合标签只在括号内生效，避免误伤标题中的 "日" "中"
    if m and (bracketed or m.group('suffix')):
        return _languages_from_compound(m.group('langs'))
    return set()


def collect_tags(segments: Iterable[Segment]) -> List[Set[SubtitleLanguage]]:
    """逐个标签收集语言，每个元素对应一个命中的标签"""
    tags: List[Set[SubtitleLanguage]] = []
    for segment in segments:
        for word in split_words(segment.text):
            languages = _languages_from_word(word, segment.bracketed)
            if languages:
                tags.append(languages)
    return tags


def collect_positive(segments: Iterable[Segment]) -> Set[SubtitleLanguage]:
    """阶段一：收集所有正向语言标签"""
    return set().union(*collect_tags(segments))


def has_negative_marker(segments: Iterable[Segment]) -> bool:
    return any(NEGATIVE_RE.search(segment.text) for segment in segments)


def extract_subtitle_languages(segments: Sequence[Segment]) -> FrozenSet[SubtitleLanguage]:
    tags = collect_tags(segments)
    # 阶段二：否定标签覆盖正向匹配，含中文的标签整体作废，仅保留独立的日/英标签
    if has_negative_marker(segments):
        tags = [tag for tag in tags if not tag & CHINESE_LANGUAGES]
    return frozenset(set().union(*tags))
