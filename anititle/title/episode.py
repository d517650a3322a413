"""
集数范围解析 - 有序规则引擎

按固定顺序依次尝试以下规则，第一个命中的规则决定结果：

1. 季+集      S01E05 / S1 05 / 第1季第5集 / 2nd Season - 05 → Single(05)
2. 季度区间    S1-S3 / S1-3 / 第1-3季             → SeasonSet(S1+S2+S3)
3. 单季       S01 / Season 2 / 第二季 / 2nd Season → Season(n)
4. 普通集数    " - 10" / EP10 / 第10话 / [10] / [01-12] → Single / Range
5. 特典       特典映像 / OVA / SP 语境下的集数       → Special(n)
6. 剧场版      Movie / Movie v2 / 剧场版           → Unknown
7. 兜底                                          → Unknown

每条规则都是独立的匹配函数，便于逐条测试与调整优先级。
"""

import re
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .models import (
    EpisodeRange,
    EpisodeSort,
    Range,
    Season,
    SeasonSet,
    Single,
    Special,
    Unknown,
)
from .resolution import PIX_RE
from .tokenizer import Segment, split_words

logger = logging.getLogger(__name__)

Rule = Callable[[Sequence[Segment]], Optional[EpisodeRange]]


# ============================================================================
# 常量 - 数字映射
# ============================================================================

CHINESE_NUM_MAP = {
    '一': 1, '二': 2, '三': 3, '四': 4, '五': 5,
    '六': 6, '七': 7, '八': 8, '九': 9, '十': 10,
}


def _chinese_num_to_int(s: str) -> Optional[int]:
    """将中文数字 (一 ~ 九十九) 转换为整数，支持阿拉伯数字直通"""
    if s.isdigit():
        return int(s)
    if len(s) == 1:
        return CHINESE_NUM_MAP.get(s)
    if '十' in s:
        tens, _, ones = s.partition('十')
        tens_value = CHINESE_NUM_MAP.get(tens, 0) if tens else 1
        ones_value = CHINESE_NUM_MAP.get(ones, 0) if ones else 0
        if (tens and not tens_value) or (ones and not ones_value):
            return None
        return tens_value * 10 + ones_value
    return None


def _is_year(number: str) -> bool:
    return len(number) == 4 and 1900 <= int(number) <= 2099


def _episode(start: str, end: Optional[str] = None) -> Optional[EpisodeRange]:
    """由集数文本构造 Single / Range；年份视为无效"""
    if _is_year(start.split('.')[0]) or (end and _is_year(end)):
        return None
    if end and end != start:
        if int(end) < float(start):
            return None
        return Range(EpisodeSort(start), EpisodeSort(end))
    return Single(EpisodeSort(start))


# ============================================================================
# 常量 - 正则模式
# ============================================================================

# 规则1: 季+集
SEASON_EPISODE_PATTERNS = [
    re.compile(
        r'(?<![a-z0-9])S(?P<season>\d{1,2})\s?E(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?'
        r'(?:\s*[-~]\s*E?(?P<end>\d{1,4})(?![\d.]))?(?![a-z0-9])',
        re.IGNORECASE,
    ),
    re.compile(
        r'(?<![a-z0-9])S(?P<season>\d{1,2})(?:\s+-)?\s+(?P<ep>\d{1,4})(?:v\d)?(?![a-z0-9.])',
        re.IGNORECASE,
    ),
    re.compile(r'第\s*(?P<season>[一二三四五六七八九十\d]+)\s*[季期]\s*第\s*(?P<ep>\d{1,4})\s*[集话話]'),
    re.compile(
        r'Season\s*(?P<season>\d{1,2})\s*(?:Episode|Ep)\s*(?P<ep>\d{1,4})(?![a-z0-9])',
        re.IGNORECASE,
    ),
    # Season 2 - 05 / 2nd Season - 05 / 第二季 - 05 / 第二季 EP05
    re.compile(
        r'(?<![a-z0-9])Season\s*(?P<season>\d{1,2})(?:\s+-\s*|\s*EP\.?\s?)'
        r'(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?(?![a-z0-9.])',
        re.IGNORECASE,
    ),
    re.compile(
        r'(?<![a-z0-9])(?P<season>\d{1,2})(?:st|nd|rd|th)\s*Season\s*(?:-\s*|(?:Episode|EP)\.?\s?)'
        r'(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?(?![a-z0-9.])',
        re.IGNORECASE,
    ),
    re.compile(
        r'第\s*(?P<season>[一二三四五六七八九十]+|\d{1,2})\s*[季期]\s*(?:-\s*|EP\.?\s?)'
        r'(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?(?![a-z0-9.])',
        re.IGNORECASE,
    ),
]

# 规则2: 季度区间
SEASON_RANGE_PATTERNS = [
    re.compile(r'(?<![a-z0-9])S(?P<first>\d{1,2})-S?(?P<last>\d{1,2})(?![a-z0-9])', re.IGNORECASE),
    re.compile(r'第\s*(?P<first>\d{1,2})\s*[-~至]\s*(?P<last>\d{1,2})\s*季'),
]

# 规则3: 单季
SEASON_PATTERNS = [
    re.compile(r'(?<![a-z0-9])S(?P<season>\d{1,2})(?![a-z0-9])', re.IGNORECASE),
    re.compile(r'(?<![a-z0-9])Season\s*(?P<season>\d{1,2})(?!\d)', re.IGNORECASE),
    re.compile(r'(?<![a-z0-9])(?P<season>\d{1,2})(?:st|nd|rd|th)\s*Season', re.IGNORECASE),
    re.compile(r'第\s*(?P<season>[一二三四五六七八九十]+|\d{1,2})\s*[季期]'),
]

# 规则4: 普通集数
BRACKET_EPISODE_RE = re.compile(
    r'^(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?(?:\s*(?:END|Fin|完))?$',
    re.IGNORECASE,
)
BRACKET_RANGE_RE = re.compile(
    r'^(?P<ep>\d{1,4})\s*[-~]\s*(?P<end>\d{1,4})(?:\s*(?:END|Fin|完|合集|全集))?$',
    re.IGNORECASE,
)
MARKED_EPISODE_PATTERNS = [
    re.compile(
        r'(?<![a-z0-9])(?:Episode|EP|E)\.?\s?(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?'
        r'(?:\s*[-~]\s*(?:EP?)?(?P<end>\d{1,4}))?(?![a-z0-9])',
        re.IGNORECASE,
    ),
    re.compile(r'第\s*(?P<ep>\d{1,4})\s*[-~]\s*(?P<end>\d{1,4})\s*[集话話]'),
    re.compile(r'第\s*(?P<ep>\d{1,4}(?:\.\d)?)\s*[集话話]'),
]
DASH_EPISODE_RE = re.compile(
    r'(?:^|\s)-\s*(?P<ep>\d{1,4}(?:\.\d)?)(?:v\d)?'
    r'(?:\s*[-~]\s*(?P<end>\d{1,4}))?(?:\s*(?:END|Fin|完))?(?=\s|-|$)',
    re.IGNORECASE,
)
TRAILING_EPISODE_RE = re.compile(r'(?:^|\s)(?P<ep>\d{2,4})(?:v\d)?\s*-?$')

# 画质/编码/来源标签 (用于判断尾随数字后的括号是否为技术规格)
QUALITY_RE = re.compile(
    r'(?<![a-zA-Z0-9])'
    r'(H\.?26[45]|[Xx]26[45]|AVC|HEVC|AV1|VP9|10bit|8bit|Hi10p|Ma10p'
    r'|WEB-?DL|WEB-?RIP|BDRIP|BDRemux|BLURAY|DVDRIP|HDTV|TVRip|BD|WEB'
    r'|AAC|FLAC|AC-?3|DTS|TrueHD|OPUS)'
    r'(?![a-zA-Z0-9])',
    re.IGNORECASE,
)

# 规则5: 特典
# 特典词只在整个括号由其组成时生效 ([SP] / [Extras])；OVA/OAD 在任意位置生效
SPECIAL_MARKER_WORDS = {'SP', 'SPS', 'OVA', 'OAD', 'SPECIAL', 'SPECIALS', 'EXTRA', 'EXTRAS'}
SPECIAL_ACRONYMS = {'OVA', 'OAD'}
SPECIAL_MARKER_RE = re.compile(r'特典|番外|特[别別]篇')
SPECIAL_EPISODE_RE = re.compile(
    r'(?<![a-z0-9])(?:SP|OVA|OAD|Special|Extra)\s?(?P<ep>\d{1,3})(?![a-z0-9])',
    re.IGNORECASE,
)

# 规则6: 剧场版
MOVIE_RE = re.compile(r'(?<![a-z])(?:the\s+)?movie(?![a-z])|剧场版|劇場版|映画', re.IGNORECASE)


# ============================================================================
# 规则实现
# ============================================================================

def match_season_episode(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """S01E05 → 05..05，季度信息仅作参考并被丢弃"""
    for segment in segments:
        for pattern in SEASON_EPISODE_PATTERNS:
            m = pattern.search(segment.text)
            if not m:
                continue
            groups = m.groupdict()
            result = _episode(groups['ep'], groups.get('end'))
            if result is not None:
                return result
    return None


def match_season_range(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """S1-S3 → S1+S2+S3"""
    for segment in segments:
        for pattern in SEASON_RANGE_PATTERNS:
            for m in pattern.finditer(segment.text):
                first, last = int(m.group('first')), int(m.group('last'))
                if first < last:
                    return SeasonSet.expand(first, last)
    return None


def match_season(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """S01 / S1 → S1"""
    for segment in segments:
        for pattern in SEASON_PATTERNS:
            m = pattern.search(segment.text)
            if not m:
                continue
            season = _chinese_num_to_int(m.group('season'))
            if season is not None:
                return Season(season)
    return None


def _is_quality_segment(segment: Segment) -> bool:
    return segment.bracketed and bool(PIX_RE.search(segment.text) or QUALITY_RE.search(segment.text))


def _scan_episode(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    for index, segment in enumerate(segments):
        text = segment.text
        candidates: List[Tuple[str, Optional[str]]] = []

        if segment.bracketed:
            for pattern in (BRACKET_EPISODE_RE, BRACKET_RANGE_RE):
                m = pattern.match(text)
                if m:
                    candidates.append((m.group('ep'), m.groupdict().get('end')))
        for pattern in MARKED_EPISODE_PATTERNS:
            m = pattern.search(text)
            if m:
                candidates.append((m.group('ep'), m.groupdict().get('end')))
        if not segment.bracketed:
            m = DASH_EPISODE_RE.search(text)
            if m:
                candidates.append((m.group('ep'), m.group('end')))
            following = segments[index + 1] if index + 1 < len(segments) else None
            m = TRAILING_EPISODE_RE.search(text)
            if m and following is not None and _is_quality_segment(following):
                candidates.append((m.group('ep'), None))

        for start, end in candidates:
            result = _episode(start, end)
            if result is not None:
                return result
    return None


def _is_special_bracket(segment: Segment) -> bool:
    words = split_words(segment.text)
    return segment.bracketed and bool(words) and all(w.upper() in SPECIAL_MARKER_WORDS for w in words)


def has_special_marker(segments: Sequence[Segment]) -> bool:
    for segment in segments:
        if SPECIAL_MARKER_RE.search(segment.text) or SPECIAL_EPISODE_RE.search(segment.text):
            return True
        if _is_special_bracket(segment):
            return True
        if any(word.upper() in SPECIAL_ACRONYMS for word in split_words(segment.text)):
            return True
    return False


def match_episode(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """- 10 / EP10 / [10] / [01-12] → Single / Range；特典语境交由特典规则处理"""
    if has_special_marker(segments):
        return None
    return _scan_episode(segments)


def match_special(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """特典映像 [01] / OVA 2 / SP01 → SP01..SP01"""
    if not has_special_marker(segments):
        return None
    for segment in segments:
        m = SPECIAL_EPISODE_RE.search(segment.text)
        if m:
            return Special(EpisodeSort(m.group('ep')))
    found = _scan_episode(segments)
    if isinstance(found, Single):
        return Special(found.sort)
    return None


def match_movie(segments: Sequence[Segment]) -> Optional[EpisodeRange]:
    """剧场版无法确定集数，版本后缀 (v2) 不影响结果"""
    if any(MOVIE_RE.search(segment.text) for segment in segments):
        return Unknown()
    return None


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("season_episode", match_season_episode),
    ("season_range", match_season_range),
    ("season", match_season),
    ("episode", match_episode),
    ("special", match_special),
    ("movie", match_movie),
)


def resolve_episode_range(segments: Sequence[Segment]) -> EpisodeRange:
    """依序执行规则，返回第一个命中的结果；均未命中时返回 Unknown"""
    for name, rule in RULES:
        result = rule(segments)
        if result is not None:
            logger.debug(f"集数规则 '{name}' 命中: {result}")
            return result
    return Unknown()
