"""
WeChat Cover - HTTP 接口服务
POST /api/parse 解析公众号文章封面
"""
import logging
from typing import Iterator

import requests
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import config
from .errors import (
    MSG_COVER_NOT_FOUND,
    MSG_INVALID_DOMAIN,
    MSG_MISSING_URL,
    MSG_PARSE_FAILED,
    MSG_TIMEOUT,
    CoverParseError,
)
from .models import ParseError, ParseRequest, ParseResult
from .service import parse_cover
from .session import build_session

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(title="WeChat Cover API", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_session() -> Iterator[requests.Session]:
    """每个请求一个独立 Session，响应后关闭"""
    session = build_session(config)
    try:
        yield session
    finally:
        session.close()


@app.exception_handler(CoverParseError)
async def handle_parse_error(request: Request, exc: CoverParseError):
    return JSONResponse(status_code=exc.status, content=ParseError(error=exc.message).model_dump())


@app.exception_handler(RequestValidationError)
async def handle_bad_body(request: Request, exc: RequestValidationError):
    # 请求体不是 JSON 对象或 url 类型不对，都按缺少 URL 处理
    logger.warning("[API] 请求体无效: %s", exc.errors())
    return JSONResponse(status_code=400, content=ParseError(error=MSG_MISSING_URL).model_dump())


@app.post("/api/parse", response_model=ParseResult, response_model_exclude_none=True)
def post_parse(item: ParseRequest, session: requests.Session = Depends(get_session)):
    return parse_cover(item, session=session)


@app.get("/health")
def get_health():
    return {"status": "ok", "message": "服务运行正常"}


@app.get("/api/docs.json")
def get_docs(request: Request):
    base_url = str(request.base_url).rstrip("/")
    return {
        "title": "微信公众号封面提取 API 文档",
        "description": "支持一键提取微信公众号文章封面图",
        "version": API_VERSION,
        "baseUrl": base_url,
        "endpoints": {
            "parse": {
                "method": "POST",
                "path": "/api/parse",
                "description": "解析微信公众号文章封面图",
                "request": {
                    "contentType": "application/json",
                    "body": {
                        "url": {
                            "type": "string",
                            "required": True,
                            "description": "微信公众号文章链接，例如: https://mp.weixin.qq.com/s/xxxxx",
                        }
                    },
                },
                "response": {
                    "success": {
                        "status": 200,
                        "body": {
                            "success": True,
                            "coverUrl": "string (base64图片数据或图片URL)",
                            "originalUrl": "string (原始文章URL)",
                            "imageUrl": "string (原始图片URL，仅当coverUrl是base64)",
                            "warning": "string (图片下载失败时的提示)",
                        },
                    },
                    "error": {
                        "status": [400, 404, 408, 500],
                        "body": {"error": "string (错误信息)"},
                        "examples": [
                            {"status": 400, "error": MSG_MISSING_URL},
                            {"status": 400, "error": MSG_INVALID_DOMAIN},
                            {"status": 404, "error": MSG_COVER_NOT_FOUND},
                            {"status": 408, "error": MSG_TIMEOUT},
                            {"status": 500, "error": MSG_PARSE_FAILED},
                        ],
                    },
                },
                "usage": {
                    "curl": (
                        f"curl -X POST {base_url}/api/parse "
                        "-H \"Content-Type: application/json\" "
                        "-d '{\"url\": \"https://mp.weixin.qq.com/s/xxxxx\"}'"
                    ),
                },
            },
            "health": {
                "method": "GET",
                "path": "/health",
                "description": "健康检查接口",
            },
        },
    }
