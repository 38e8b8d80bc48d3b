"""
WeChat Cover - 封面 URL 提取

按优先级依次尝试以下规则，命中即返回：
1. 脚本变量 msg_cdn_url（公众号自带的封面 CDN 地址，最可靠）
2. og:image meta 标签
3. msg_link_desc 描述块之后的第一张 mmbiz.qpic.cn 图片
4. 全文第一张 mmbiz.qpic.cn 图片（通常是封面）
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

from ..errors import CoverParseError

logger = logging.getLogger(__name__)

_CDN_VAR_RE = re.compile(r"""var\s+msg_cdn_url\s*=\s*["']([^"']+)["']""")
_OG_IMAGE_RE = re.compile(
    r"""<meta\s+property=["']og:image["']\s+content=["']([^"']+)["']""",
    re.IGNORECASE,
)
_DESC_BLOCK_RE = re.compile(r"msg_link_desc[^>]*>(.*?)</p>", re.DOTALL)
_QPIC_URL_RE = re.compile(r"""https?://mmbiz\.qpic\.cn/[^"'\s]+""")


def match_cdn_variable(html: str) -> Optional[str]:
    match = _CDN_VAR_RE.search(html)
    return match.group(1) if match and match.group(1) else None


def match_og_image(html: str) -> Optional[str]:
    match = _OG_IMAGE_RE.search(html)
    return match.group(1) if match and match.group(1) else None


def match_near_description(html: str) -> Optional[str]:
    desc = _DESC_BLOCK_RE.search(html)
    if not desc:
        return None
    match = _QPIC_URL_RE.search(html, desc.start())
    return match.group(0) if match else None


def match_first_cdn_image(html: str) -> Optional[str]:
    match = _QPIC_URL_RE.search(html)
    return match.group(0) if match else None


# 顺序即优先级
COVER_MATCHERS: List[Tuple[str, Callable[[str], Optional[str]]]] = [
    ("msg_cdn_url", match_cdn_variable),
    ("og:image", match_og_image),
    ("msg_link_desc", match_near_description),
    ("mmbiz.qpic.cn", match_first_cdn_image),
]


def find_cover_candidates(html: str) -> List[Tuple[str, str]]:
    """返回每条规则的命中结果（按优先级），用于调试"""
    html = html or ""
    found = []
    for name, matcher in COVER_MATCHERS:
        url = matcher(html)
        if url:
            found.append((name, url))
    return found


def extract_cover_url(html: str) -> str:
    """返回优先级最高的封面 URL，全部未命中时抛出 COVER_NOT_FOUND (404)"""
    html = html or ""
    for name, matcher in COVER_MATCHERS:
        url = matcher(html)
        if url:
            logger.info("[Cover] 规则 %s 命中: %s", name, url)
            return url
    logger.error("[Cover] 未能解析出封面URL")
    raise CoverParseError.cover_not_found()
