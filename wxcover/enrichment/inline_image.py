"""
WeChat Cover - 封面图内联

下载封面图并编码为 data URI，前端无需再次请求（绕过防盗链）。
Best-effort：下载失败不会抛出异常，而是返回带提示的降级结果，
调用方仍可把原始图片 URL 交给用户。
"""

from __future__ import annotations

import base64
import logging
from typing import Optional

import requests

from ..config import Config, config as default_config
from ..errors import MSG_IMAGE_LIMITED
from ..models import ImageFetchOutcome
from ..session import browser_headers

logger = logging.getLogger(__name__)


def to_data_uri(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def fetch_inline_image(
    url: str,
    session: requests.Session,
    cfg: Optional[Config] = None,
) -> ImageFetchOutcome:
    """下载图片并编码；任何失败（超时 / 非 2xx / 网络等）都降级为原始 URL"""
    cfg = cfg or default_config
    try:
        resp = session.get(
            url,
            headers=browser_headers(cfg, for_image=True),
            timeout=cfg.image_timeout_seconds,
        )
        resp.raise_for_status()
        data = resp.content or b""
    except Exception as exc:
        logger.error("[Image] 图片下载失败: %s | %s", url, exc)
        return ImageFetchOutcome.degraded(url, MSG_IMAGE_LIMITED)

    mime_type = resp.headers.get("content-type") or cfg.default_image_mime
    logger.info("[Image] 图片下载成功，大小: %s bytes", len(data))
    return ImageFetchOutcome.success(
        source_url=url,
        data_uri=to_data_uri(data, mime_type),
        mime_type=mime_type,
        size=len(data),
    )
