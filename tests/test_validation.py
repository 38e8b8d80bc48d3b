import pytest

from wxcover.config import Config
from wxcover.errors import CoverParseError
from wxcover.models import ErrorKind, ParseRequest
from wxcover.validation import validate_request


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url(url):
    with pytest.raises(CoverParseError) as exc_info:
        validate_request(ParseRequest(url=url))
    assert exc_info.value.kind == ErrorKind.MISSING_URL
    assert exc_info.value.status == 400
    assert exc_info.value.message == "请提供文章URL"


@pytest.mark.parametrize("url", ["https://example.com/article", "https://weixin.qq.com/s/abc"])
def test_invalid_domain(url):
    with pytest.raises(CoverParseError) as exc_info:
        validate_request(ParseRequest(url=url))
    assert exc_info.value.kind == ErrorKind.INVALID_DOMAIN
    assert exc_info.value.status == 400
    assert exc_info.value.message == "请提供有效的微信公众号文章链接"


def test_valid_url_is_stripped():
    assert validate_request(ParseRequest(url="  https://mp.weixin.qq.com/s/abc \n")) == "https://mp.weixin.qq.com/s/abc"


def test_host_marker_comes_from_config():
    cfg = Config(article_host="example.com")
    assert validate_request(ParseRequest(url="https://example.com/a"), cfg) == "https://example.com/a"
