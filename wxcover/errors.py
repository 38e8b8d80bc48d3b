"""
WeChat Cover - 错误类型与提示文案
"""
from typing import Optional

from .models import ErrorKind

MSG_MISSING_URL = "请提供文章URL"
MSG_INVALID_DOMAIN = "请提供有效的微信公众号文章链接"
MSG_COVER_NOT_FOUND = "未能找到文章封面，请确认链接是否正确"
MSG_TIMEOUT = "请求超时，请重试"
MSG_PARSE_FAILED = "解析失败，请检查链接是否正确或稍后重试"
MSG_IMAGE_LIMITED = "图片加载可能受限，建议直接下载"


def upstream_message(status: int) -> str:
    return f"无法访问该链接 ({status})"


class CoverParseError(Exception):
    """封面解析失败，携带 HTTP 状态码与面向用户的提示"""

    def __init__(self, kind: ErrorKind, status: int, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.message = message
        # 底层异常信息，仅用于日志
        self.detail = detail

    def __repr__(self) -> str:
        return f"CoverParseError(kind={self.kind.value!r}, status={self.status}, message={self.message!r})"

    @classmethod
    def missing_url(cls) -> "CoverParseError":
        return cls(ErrorKind.MISSING_URL, 400, MSG_MISSING_URL)

    @classmethod
    def invalid_domain(cls) -> "CoverParseError":
        return cls(ErrorKind.INVALID_DOMAIN, 400, MSG_INVALID_DOMAIN)

    @classmethod
    def cover_not_found(cls) -> "CoverParseError":
        return cls(ErrorKind.COVER_NOT_FOUND, 404, MSG_COVER_NOT_FOUND)

    @classmethod
    def timeout(cls) -> "CoverParseError":
        return cls(ErrorKind.TIMEOUT, 408, MSG_TIMEOUT)

    @classmethod
    def upstream(cls, status: int) -> "CoverParseError":
        return cls(ErrorKind.UPSTREAM_HTTP, status, upstream_message(status))

    @classmethod
    def network(cls, detail: Optional[str] = None) -> "CoverParseError":
        return cls(ErrorKind.NETWORK, 500, MSG_PARSE_FAILED, detail)

    @classmethod
    def unclassified(cls, detail: Optional[str] = None) -> "CoverParseError":
        return cls(ErrorKind.UNCLASSIFIED, 500, MSG_PARSE_FAILED, detail)
