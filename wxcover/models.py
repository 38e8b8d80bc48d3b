"""
WeChat Cover Data Models - 数据模型定义
"""
from typing import Optional
from pydantic import BaseModel
from enum import Enum


class ErrorKind(str, Enum):
    """解析失败类型"""
    MISSING_URL = "missing_url"
    INVALID_DOMAIN = "invalid_domain"
    COVER_NOT_FOUND = "cover_not_found"
    TIMEOUT = "timeout"
    UPSTREAM_HTTP = "upstream_http"
    NETWORK = "network"
    UNCLASSIFIED = "unclassified"


class ParseRequest(BaseModel):
    """解析请求，url 缺失交给校验阶段处理"""
    url: Optional[str] = None


class ParseResult(BaseModel):
    """解析结果"""
    success: bool = True
    coverUrl: str               # data URI，图片下载失败时为原始图片 URL
    originalUrl: str            # 客户端传入的原始文章链接（未去空白）
    imageUrl: Optional[str] = None  # 仅当 coverUrl 为 data URI 时提供
    warning: Optional[str] = None   # 仅在降级时提供


class ParseError(BaseModel):
    """错误响应体"""
    error: str


class ImageOutcomeKind(str, Enum):
    """图片下载结果类型"""
    ENCODED = "encoded"
    DEGRADED = "degraded"


class ImageFetchOutcome(BaseModel):
    """
    图片下载结果（带标签的结果类型）

    - ENCODED: data_uri / mime_type / size 有效
    - DEGRADED: raw_url / warning 有效
    """
    kind: ImageOutcomeKind
    source_url: str
    data_uri: Optional[str] = None
    mime_type: Optional[str] = None
    size: int = 0
    warning: Optional[str] = None

    @property
    def encoded(self) -> bool:
        return self.kind == ImageOutcomeKind.ENCODED

    @property
    def raw_url(self) -> str:
        return self.source_url

    @classmethod
    def success(cls, source_url: str, data_uri: str, mime_type: str, size: int) -> "ImageFetchOutcome":
        return cls(
            kind=ImageOutcomeKind.ENCODED,
            source_url=source_url,
            data_uri=data_uri,
            mime_type=mime_type,
            size=size,
        )

    @classmethod
    def degraded(cls, source_url: str, warning: str) -> "ImageFetchOutcome":
        return cls(kind=ImageOutcomeKind.DEGRADED, source_url=source_url, warning=warning)
