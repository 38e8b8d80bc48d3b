"""
WeChat Cover - 微信公众号文章封面提取
"""
from .errors import CoverParseError
from .models import ParseRequest, ParseResult
from .service import parse_cover

__all__ = ["CoverParseError", "ParseRequest", "ParseResult", "parse_cover"]
