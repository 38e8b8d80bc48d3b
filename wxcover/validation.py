"""
WeChat Cover - 请求校验
不发起任何网络请求
"""
from typing import Optional

from .config import Config, config as default_config
from .errors import CoverParseError
from .models import ParseRequest


def validate_request(request: ParseRequest, cfg: Optional[Config] = None) -> str:
    """
    校验文章链接，返回去除首尾空白后的 URL

    - url 缺失或为空 -> MISSING_URL (400)
    - 不包含公众号文章域名 -> INVALID_DOMAIN (400)
    """
    cfg = cfg or default_config
    url = (request.url or "").strip()
    if not url:
        raise CoverParseError.missing_url()
    if cfg.article_host not in url:
        raise CoverParseError.invalid_domain()
    return url
