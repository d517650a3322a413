from .title import ParsedTitle, parse, parse_cached

__all__ = ['ParsedTitle', 'parse', 'parse_cached']
