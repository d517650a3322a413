"""
标题解析入口

parse(title) 是一个纯函数：分词后交给三个相互独立的提取器
（集数范围、字幕语言、分辨率），再组合为不可变的 ParsedTitle。
解析器没有失败模式，无法识别的信息退化为默认值 (S? / None / 空集合)。
"""

import logging
from functools import lru_cache
from typing import Any, Callable, FrozenSet, Optional, Sequence, TypeVar

from anititle.core.config import settings

from .episode import resolve_episode_range
from .models import EpisodeRange, ParsedTitle, Resolution, SubtitleLanguage, Unknown
from .resolution import extract_resolution
from .subtitle import extract_subtitle_languages
from .tokenizer import Segment, tokenize

logger = logging.getLogger(__name__)

T = TypeVar("T")


def compose(
    title: str,
    episode_range: EpisodeRange,
    subtitle_languages: FrozenSet[SubtitleLanguage],
    resolution: Optional[Resolution],
) -> ParsedTitle:
    """组合三个提取器的结果，不做任何交叉校验"""
    return ParsedTitle(
        title=title,
        episode_range=episode_range,
        subtitle_languages=frozenset(subtitle_languages),
        resolution=resolution,
    )


def _run_extractor(
    name: str,
    extractor: Callable[[Sequence[Segment]], T],
    segments: Sequence[Segment],
    default: T,
    title: str,
) -> T:
    try:
        return extractor(segments)
    except Exception as e:
        logger.error(f"标题解析 {name} 失败，使用默认值: '{title}': {e}", exc_info=True)
        return default


def parse(title: Any) -> ParsedTitle:
    """
    解析发布标题。

    Examples:
        >>> r = parse("[Up to 21℃] 怪人的沙拉碗 / Henjin no Salad Bowl - 10 (Baha 1920x1080 AVC AAC MP4)")
        >>> str(r.episode_range), r.subtitle_languages_text, str(r.resolution)
        ('10..10', 'CHT', '1080P')
    """
    if title is None:
        title = ""
    elif not isinstance(title, str):
        title = str(title)

    try:
        segments = tokenize(title)
    except Exception as e:
        logger.error(f"标题分词失败: '{title}': {e}", exc_info=True)
        segments = ()

    return compose(
        title,
        _run_extractor("episode_range", resolve_episode_range, segments, Unknown(), title),
        _run_extractor("subtitle_languages", extract_subtitle_languages, segments, frozenset(), title),
        _run_extractor("resolution", extract_resolution, segments, None, title),
    )


@lru_cache(maxsize=settings.parser.cache_size)
def parse_cached(title: str) -> ParsedTitle:
    """按原始标题缓存的 parse，结果不可变，可安全共享"""
    return parse(title)


def clear_parse_cache() -> None:
    parse_cached.cache_clear()
