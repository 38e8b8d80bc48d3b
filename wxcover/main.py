"""
WeChat Cover - 命令行入口
"""
import argparse
import json
import logging
import sys

from .config import config
from .errors import CoverParseError
from .extraction import find_cover_candidates
from .models import ParseRequest
from .service import parse_cover

logger = logging.getLogger(__name__)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _log_candidates(html: str) -> None:
    """调试模式：列出每条规则的命中结果"""
    for name, candidate in find_cover_candidates(html):
        logger.debug("[Cover] 候选 %s: %s", name, candidate)


def cmd_parse(args: argparse.Namespace) -> int:
    try:
        result = parse_cover(
            ParseRequest(url=args.url),
            inline_image=not args.no_image,
            on_html=_log_candidates if args.debug else None,
        )
    except CoverParseError as exc:
        _print_json({"error": exc.message, "status": exc.status})
        return 1
    _print_json(result.model_dump(exclude_none=True))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    host = args.host or config.server_host
    port = args.port or config.server_port
    logger.info("🚀 服务地址: http://%s:%s", host, port)
    uvicorn.run(
        "wxcover.server:app",
        host=host,
        port=port,
        log_level="debug" if args.debug else "info",
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wxcover", description="微信公众号封面提取")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="开启调试模式（更详细的日志）"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="解析一篇文章的封面")
    p_parse.add_argument("url", help="公众号文章链接")
    p_parse.add_argument(
        "--no-image",
        action="store_true",
        help="只输出高清图 URL，不下载图片"
    )
    p_parse.set_defaults(func=cmd_parse)

    p_serve = sub.add_parser("serve", help="启动 HTTP 服务")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)
    return parser


def main(argv=None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)

    # 配置日志
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    if args.debug:
        logger.debug("调试模式已开启")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
