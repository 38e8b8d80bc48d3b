"""
WeChat Cover Extraction Module - 封面提取与规范化
"""
from .cover import COVER_MATCHERS, extract_cover_url, find_cover_candidates
from .normalize import normalize_cover_url

__all__ = [
    "COVER_MATCHERS",
    "extract_cover_url",
    "find_cover_candidates",
    "normalize_cover_url",
]
