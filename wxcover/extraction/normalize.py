"""
WeChat Cover - 封面 URL 规范化（纯字符串处理）
"""
import re

_RESOLUTION_640_RE = re.compile(r"/640($|\?)")
_EXTENSION_RE = re.compile(r"(\.[^.?]+)(\?|$)")


def normalize_cover_url(url: str) -> str:
    """
    转换为高清图地址：
    - &amp; -> &
    - 结尾（或查询参数前）的 /640 -> /0
    - 既无 /0 也无 /640 时，在扩展名前插入 /0
    对已规范化的 URL 再次调用结果不变。
    """
    url = (url or "").replace("&amp;", "&")
    url = _RESOLUTION_640_RE.sub(r"/0\1", url)
    if "/0" not in url and "/640" not in url:
        url = _EXTENSION_RE.sub(r"/0\1\2", url, count=1)
    return url
