"""
WeChat Cover Configuration - 配置文件
"""
import os
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _get_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_list_env(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if value is None:
        return default
    return [part.strip() for part in value.split(",") if part.strip()]


class Config(BaseModel):
    """服务配置"""

    # 平台域名
    # 文章链接必须包含 article_host
    article_host: str = "mp.weixin.qq.com"
    referer: str = "https://mp.weixin.qq.com/"

    # 模拟桌面浏览器的请求头
    user_agent: str = os.getenv(
        "WX_COVER_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )
    accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    accept_language: str = "zh-CN,zh;q=0.9,en;q=0.8"

    # 超时（秒）：文章页 15 秒，图片 20 秒
    article_timeout_seconds: float = float(os.getenv("WX_COVER_ARTICLE_TIMEOUT", "15"))
    image_timeout_seconds: float = float(os.getenv("WX_COVER_IMAGE_TIMEOUT", "20"))

    # 响应未声明 Content-Type 时使用
    default_image_mime: str = "image/jpeg"

    # 网络请求配置
    requests_verify_ssl: bool = _get_bool_env("WX_COVER_VERIFY_SSL", True)
    requests_use_proxy: bool = _get_bool_env("WX_COVER_USE_PROXY", True)
    suppress_insecure_warnings: bool = _get_bool_env("WX_COVER_SUPPRESS_INSECURE_WARNINGS", True)

    # HTTP 服务
    server_host: str = os.getenv("WX_COVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("WX_COVER_PORT", "3001"))
    cors_allow_origins: List[str] = _get_list_env("WX_COVER_CORS_ORIGINS", ["*"])


# 全局配置实例
config = Config()
