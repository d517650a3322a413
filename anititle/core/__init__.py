"""
核心模块 - 纯静态配置

使用方式:
    from anititle.core import settings
    from anititle.core.config import settings
"""

from .config import settings, Settings

__all__ = [
    'settings',
    'Settings',
]
