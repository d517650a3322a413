import re
from typing import Optional, Sequence

from .models import Resolution
from .tokenizer import Segment

# 分辨率标签 (1080p / 4K) 与像素尺寸 (1920x1080)，使用词边界断言；标签只接受常见高度
PIX_RE = re.compile(
    r'(?<![a-zA-Z0-9])'
    r'(?:(?P<label>240|360|480|540|560|576|720|1080|1440|2160|4320)[Pp]'
    r'|(?P<k>[248])[Kk]'
    r'|(?P<width>\d{3,4})\s*[xX×]\s*(?P<height>\d{3,4}))'
    r'(?![a-zA-Z0-9])'
)

_K_HEIGHTS = {'2': 1440, '4': 2160, '8': 4320}


def extract_resolution(segments: Sequence[Segment]) -> Optional[Resolution]:
    """按分段顺序取第一个分辨率信号"""
    for segment in segments:
        m = PIX_RE.search(segment.text)
        if not m:
            continue
        if m.group('label'):
            height = int(m.group('label'))
        elif m.group('k'):
            height = _K_HEIGHTS[m.group('k')]
        else:
            height = int(m.group('height'))
        return Resolution.nearest(height)
    return None
