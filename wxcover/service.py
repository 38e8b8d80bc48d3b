"""
WeChat Cover - 解析流程
校验 -> 抓取文章 -> 提取封面 -> 规范化 -> 下载内联
"""
import logging
from typing import Callable, Optional

import requests

from .config import Config, config as default_config
from .enrichment import fetch_inline_image
from .errors import CoverParseError
from .extraction import extract_cover_url, normalize_cover_url
from .ingestion import fetch_article_html
from .models import ParseRequest, ParseResult
from .session import build_session
from .validation import validate_request

logger = logging.getLogger(__name__)


def _run(
    request: ParseRequest,
    session: requests.Session,
    cfg: Config,
    inline_image: bool,
    on_html: Optional[Callable[[str], None]],
) -> ParseResult:
    url = validate_request(request, cfg)
    # originalUrl 原样返回客户端传入的链接
    original_url = request.url
    html = fetch_article_html(url, session, cfg)
    if on_html is not None:
        on_html(html)
    cover_url = normalize_cover_url(extract_cover_url(html))
    logger.info("[Cover] 解析成功，封面URL: %s", cover_url)

    if not inline_image:
        return ParseResult(coverUrl=cover_url, originalUrl=original_url)

    outcome = fetch_inline_image(cover_url, session, cfg)
    if outcome.encoded:
        return ParseResult(
            coverUrl=outcome.data_uri,
            originalUrl=original_url,
            imageUrl=cover_url,
        )
    return ParseResult(
        coverUrl=outcome.raw_url,
        originalUrl=original_url,
        warning=outcome.warning,
    )


def parse_cover(
    request: ParseRequest,
    session: Optional[requests.Session] = None,
    cfg: Optional[Config] = None,
    *,
    inline_image: bool = True,
    on_html: Optional[Callable[[str], None]] = None,
) -> ParseResult:
    """
    解析公众号文章封面

    失败时抛出 CoverParseError（带状态码）；意料之外的异常统一归为 500。
    未传入 session 时临时创建并在结束后关闭。
    on_html 在拿到文章 HTML 后调用（调试用），不会额外发起请求。
    """
    cfg = cfg or default_config
    owns_session = session is None
    if owns_session:
        session = build_session(cfg)
    try:
        return _run(request, session, cfg, inline_image, on_html)
    except CoverParseError as exc:
        logger.error("[Parse] 解析错误 (%s): %s", exc.status, exc.message)
        raise
    except Exception as exc:
        logger.exception("[Parse] 未预期的错误: %s", exc)
        raise CoverParseError.unclassified(str(exc)) from exc
    finally:
        if owns_session:
            session.close()
