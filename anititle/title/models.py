"""
标题解析数据结构

ParsedTitle 是解析器唯一的输出，由三个相互独立的提取结果组成：
集数范围 (EpisodeRange)、字幕语言集合 (SubtitleLanguage)、分辨率 (Resolution)。
所有对象均为不可变值类型，相等性按结构比较。
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from anititle.utils.common import convert_keys_to_camel, format_episode_ranges


# ============================================================================
# 集数 (EpisodeSort)
# ============================================================================

_NUMBER_RE = re.compile(r'^\d+(?:\.\d+)?$')


@dataclass(frozen=True)
class EpisodeSort:
    """标题中出现的集数，保留原始写法 (如 "05")"""
    raw: str

    def __str__(self) -> str:
        return self.raw

    @property
    def number(self) -> Optional[float]:
        """数值形式，无法解析时为 None"""
        if _NUMBER_RE.match(self.raw):
            return float(self.raw)
        return None

    def matches(self, other: Any) -> bool:
        """按数值比较，"05" 与 "5" 视为同一集"""
        if isinstance(other, EpisodeSort):
            other_number = other.number
        elif isinstance(other, (int, float)):
            other_number = float(other)
        else:
            other_number = EpisodeSort(str(other).strip()).number
        if self.number is None or other_number is None:
            return isinstance(other, EpisodeSort) and other.raw == self.raw
        return self.number == other_number


def _as_number(sort: Any) -> Optional[float]:
    if isinstance(sort, EpisodeSort):
        return sort.number
    if isinstance(sort, (int, float)):
        return float(sort)
    return EpisodeSort(str(sort).strip()).number


# ============================================================================
# 集数范围 (EpisodeRange) - 封闭的变体集合
# ============================================================================

class EpisodeRange(ABC):
    """集数范围基类。变体: Single / Range / Season / SeasonSet / Special / Unknown"""

    @abstractmethod
    def __str__(self) -> str:
        """规范字符串形式"""

    @property
    def known_sorts(self) -> Tuple[EpisodeSort, ...]:
        """该范围明确包含的集数，季度/未知范围为空"""
        return ()

    @property
    def is_single_episode(self) -> bool:
        return False

    def __contains__(self, sort: Any) -> bool:
        return any(known.matches(sort) for known in self.known_sorts)


@dataclass(frozen=True)
class Single(EpisodeRange):
    sort: EpisodeSort

    def __str__(self) -> str:
        return f"{self.sort}..{self.sort}"

    @property
    def known_sorts(self) -> Tuple[EpisodeSort, ...]:
        return (self.sort,)

    @property
    def is_single_episode(self) -> bool:
        return True


@dataclass(frozen=True)
class Range(EpisodeRange):
    start: EpisodeSort
    end: EpisodeSort

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @property
    def known_sorts(self) -> Tuple[EpisodeSort, ...]:
        start, end = self.start.number, self.end.number
        if start is None or end is None or not start.is_integer() or not end.is_integer():
            return (self.start, self.end)
        width = len(self.start.raw) if self.start.raw.startswith('0') else 0
        return tuple(EpisodeSort(str(n).zfill(width)) for n in range(int(start), int(end) + 1))

    def __contains__(self, sort: Any) -> bool:
        number = _as_number(sort)
        start, end = self.start.number, self.end.number
        if number is None or start is None or end is None:
            return super().__contains__(sort)
        return start <= number <= end


@dataclass(frozen=True)
class Season(EpisodeRange):
    number: int

    def __str__(self) -> str:
        return f"S{self.number}"


@dataclass(frozen=True)
class SeasonSet(EpisodeRange):
    seasons: Tuple[Season, ...]

    def __str__(self) -> str:
        return "+".join(str(season) for season in self.seasons)

    @classmethod
    def expand(cls, first: int, last: int) -> "SeasonSet":
        """将季度区间展开为逐季成员: S1-S3 → S1+S2+S3"""
        return cls(tuple(Season(n) for n in range(first, last + 1)))


@dataclass(frozen=True)
class Special(EpisodeRange):
    sort: EpisodeSort

    def __str__(self) -> str:
        return f"SP{self.sort}..SP{self.sort}"

    @property
    def known_sorts(self) -> Tuple[EpisodeSort, ...]:
        return (self.sort,)

    @property
    def is_single_episode(self) -> bool:
        return True

    def __contains__(self, sort: Any) -> bool:
        # 特典只与带 SP 前缀的集数对应
        if isinstance(sort, str) and sort.upper().startswith('SP'):
            return self.sort.matches(sort[2:])
        return False


@dataclass(frozen=True)
class Unknown(EpisodeRange):
    def __str__(self) -> str:
        return "S?"


# ============================================================================
# 字幕语言与分辨率
# ============================================================================

class SubtitleLanguage(Enum):
    CHS = "CHS"  # 简体中文
    CHT = "CHT"  # 繁体中文
    JPN = "JPN"
    ENG = "ENG"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


CHINESE_LANGUAGES = frozenset({SubtitleLanguage.CHS, SubtitleLanguage.CHT})


def format_languages(languages: Iterable[SubtitleLanguage]) -> str:
    """按语言代码升序、逗号分隔输出，如 "CHS, CHT, JPN" """
    return ", ".join(lang.code for lang in sorted(set(languages), key=lambda lang: lang.code))


class Resolution(Enum):
    R240P = "240P"
    R360P = "360P"
    R480P = "480P"
    R560P = "560P"
    R720P = "720P"
    R1080P = "1080P"
    R1440P = "1440P"
    R2160P = "2160P"
    R4320P = "4320P"

    @property
    def height(self) -> int:
        return int(self.value[:-1])

    @classmethod
    def nearest(cls, height: int) -> "Resolution":
        """按高度就近归类，如 1088 → 1080P"""
        return min(cls, key=lambda r: (abs(r.height - height), r.height))

    def __str__(self) -> str:
        return self.value


# ============================================================================
# 解析结果
# ============================================================================

@dataclass(frozen=True)
class ParsedTitle:
    """标题解析结果"""
    title: str
    episode_range: EpisodeRange = field(default_factory=Unknown)
    subtitle_languages: FrozenSet[SubtitleLanguage] = frozenset()
    resolution: Optional[Resolution] = None

    @property
    def subtitle_languages_text(self) -> str:
        return format_languages(self.subtitle_languages)

    def to_dict(self) -> Dict[str, Any]:
        """渲染为 camelCase 字典，供 API 返回"""
        numbers = [int(s.number) for s in self.episode_range.known_sorts
                   if s.number is not None and s.number.is_integer()]
        return convert_keys_to_camel({
            "title": self.title,
            "episode_range": str(self.episode_range),
            "episode_kind": type(self.episode_range).__name__,
            "known_episodes": format_episode_ranges(numbers, separator=", ") if numbers else "",
            "subtitle_languages": [
                lang.code for lang in sorted(self.subtitle_languages, key=lambda lang: lang.code)
            ],
            "resolution": str(self.resolution) if self.resolution else None,
        })
