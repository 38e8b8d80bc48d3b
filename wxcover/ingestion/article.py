"""
WeChat Cover - 文章页抓取

单次 GET，无重试：
- 超时 -> TIMEOUT (408)
- 非 2xx -> UPSTREAM_HTTP (上游状态码)
- 其它传输错误 -> NETWORK (500)
"""
import logging
from typing import Optional

import requests

from ..config import Config, config as default_config
from ..errors import CoverParseError
from ..session import browser_headers

logger = logging.getLogger(__name__)


def fetch_article_html(
    url: str,
    session: requests.Session,
    cfg: Optional[Config] = None,
) -> str:
    """抓取文章 HTML 原文"""
    cfg = cfg or default_config
    logger.info("[Article] 正在获取文章: %s", url)
    try:
        resp = session.get(
            url,
            headers=browser_headers(cfg),
            timeout=cfg.article_timeout_seconds,
        )
        resp.raise_for_status()
    except requests.Timeout as exc:
        logger.warning("[Article] 请求超时: %s | %s", url, exc)
        raise CoverParseError.timeout() from exc
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else 500
        logger.warning("[Article] 上游返回 %s: %s", status, url)
        raise CoverParseError.upstream(status) from exc
    except requests.RequestException as exc:
        logger.error("[Article] 网络错误: %s | %s", url, exc)
        raise CoverParseError.network(str(exc)) from exc

    html = resp.text or ""
    logger.debug("[Article] 获取成功，HTML 长度: %s", len(html))
    return html
