"""
WeChat Cover - HTTP Session 构建
"""
import logging
from typing import Dict, Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import Config, config as default_config

logger = logging.getLogger(__name__)


def build_session(cfg: Optional[Config] = None) -> requests.Session:
    """
    每次调用构建一个新的 Session（请求之间不共享状态）：
    - 不做 urllib3 Retry，失败立即返回给调用方
    - 代理策略由 requests_use_proxy 控制
    """
    cfg = cfg or default_config

    # 抑制 SSL 警告（关闭 SSL 校验时）
    if not cfg.requests_verify_ssl and cfg.suppress_insecure_warnings:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    session = requests.Session()
    session.verify = cfg.requests_verify_ssl

    if not cfg.requests_use_proxy:
        logger.debug("[HTTP] 已禁用代理（trust_env=False）")
        session.trust_env = False
        session.proxies = {"http": None, "https": None}

    # read=False：读超时直接抛出 ReadTimeoutError，由 requests 转成 ReadTimeout
    no_retry = Retry(
        total=0,
        connect=0,
        read=False,
        redirect=0,
        status=0,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=no_retry, pool_connections=2, pool_maxsize=2)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def browser_headers(cfg: Optional[Config] = None, *, for_image: bool = False) -> Dict[str, str]:
    """模拟桌面浏览器的请求头；图片请求只带 User-Agent 和 Referer"""
    cfg = cfg or default_config
    if for_image:
        return {
            "User-Agent": cfg.user_agent,
            "Referer": cfg.referer,
        }
    return {
        "User-Agent": cfg.user_agent,
        "Accept": cfg.accept,
        "Accept-Language": cfg.accept_language,
        "Referer": cfg.referer,
    }
