"""
发布标题解析

使用方式:
    from anititle.title import parse
    result = parse("[Group] Title - 01 [1080P][简日内嵌]")
"""

from .models import (
    EpisodeRange,
    EpisodeSort,
    ParsedTitle,
    Range,
    Resolution,
    Season,
    SeasonSet,
    Single,
    Special,
    SubtitleLanguage,
    Unknown,
    format_languages,
)
from .parser import clear_parse_cache, compose, parse, parse_cached
from .tokenizer import Segment, tokenize

__all__ = [
    'EpisodeRange',
    'EpisodeSort',
    'ParsedTitle',
    'Range',
    'Resolution',
    'Season',
    'SeasonSet',
    'Single',
    'Special',
    'SubtitleLanguage',
    'Unknown',
    'format_languages',
    'clear_parse_cache',
    'compose',
    'parse',
    'parse_cached',
    'Segment',
    'tokenize',
]
