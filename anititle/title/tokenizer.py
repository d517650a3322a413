"""
标题分词

将原始标题切分为方括号/圆括号分段与其余自由文本分段，供各提取器独立扫描。
分词器不做任何过滤，任意字符串（包括空串）都能得到一个（可能为空的）分段序列。
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from anititle.utils.common import collapse_whitespace


@dataclass(frozen=True)
class Segment:
    text: str
    bracketed: bool = False


# 全角/变体标点 → 半角
_PUNCTUATION_TABLE = str.maketrans({
    '【': '[', '】': ']',
    '［': '[', '］': ']',
    '（': '(', '）': ')',
    '　': ' ',
    '～': '~',
    '－': '-',
    '＋': '+',
    '／': '/',
    '：': ':',
})

_BRACKET_RE = re.compile(r'\[([^\[\]]*)\]|\(([^()]*)\)')

# 分词用分隔符
_WORD_SEPARATOR_RE = re.compile(r'[\s/\\_.,，、&+|\-]+')


def normalize(title: str) -> str:
    """统一全角标点并压缩空白"""
    return collapse_whitespace(title.translate(_PUNCTUATION_TABLE))


def tokenize(title: str) -> Tuple[Segment, ...]:
    """
    切分标题。

    Examples:
        "[Group] Title - 01 [1080P]"
        → (Segment("Group", True), Segment("Title - 01"), Segment("1080P", True))
    """
    text = normalize(title or '')
    segments: List[Segment] = []
    pos = 0
    for m in _BRACKET_RE.finditer(text):
        _append(segments, text[pos:m.start()], bracketed=False)
        inner = m.group(1) if m.group(1) is not None else m.group(2)
        _append(segments, inner, bracketed=True)
        pos = m.end()
    _append(segments, text[pos:], bracketed=False)
    return tuple(segments)


def _append(segments: List[Segment], raw: str, bracketed: bool) -> None:
    cleaned = collapse_whitespace(raw)
    if cleaned:
        segments.append(Segment(cleaned, bracketed))


def split_words(text: str) -> List[str]:
    """将分段按空白及常见分隔符拆成词"""
    return [w for w in _WORD_SEPARATOR_RE.split(text) if w]
