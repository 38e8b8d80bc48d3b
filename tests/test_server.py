"""HTTP-level tests for the FastAPI app."""

import pytest
import requests
from fastapi.testclient import TestClient

from wxcover.server import app, get_session

ARTICLE_HTML = '<script>var msg_cdn_url = "https://mmbiz.qpic.cn/mp/abc/640?x=1";</script>'


@pytest.fixture
def client(fake_session):
    app.dependency_overrides[get_session] = lambda: fake_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_parse_success(client, fake_session, make_response, article_url):
    fake_session.get.side_effect = [
        make_response(200, ARTICLE_HTML),
        make_response(200, b"\xff\xd8\xff", "image/jpeg"),
    ]
    resp = client.post("/api/parse", json={"url": article_url})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["coverUrl"] == "data:image/jpeg;base64,/9j/"
    assert body["originalUrl"] == article_url
    assert body["imageUrl"] == "https://mmbiz.qpic.cn/mp/abc/0?x=1"
    assert "warning" not in body


def test_parse_degraded_omits_image_url(client, fake_session, make_response, article_url):
    fake_session.get.side_effect = [
        make_response(200, ARTICLE_HTML),
        requests.ConnectionError("refused"),
    ]
    resp = client.post("/api/parse", json={"url": article_url})

    assert resp.status_code == 200
    body = resp.json()
    assert body["coverUrl"] == "https://mmbiz.qpic.cn/mp/abc/0?x=1"
    assert body["warning"]
    assert "imageUrl" not in body


@pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": 123}, ["not", "an", "object"]])
def test_missing_url_is_400(client, payload):
    resp = client.post("/api/parse", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "请提供文章URL"}


def test_invalid_domain_is_400(client, fake_session):
    resp = client.post("/api/parse", json={"url": "https://example.com/article"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "请提供有效的微信公众号文章链接"}
    fake_session.get.assert_not_called()


def test_cover_not_found_is_404(client, fake_session, make_response, article_url):
    fake_session.get.return_value = make_response(200, "<html></html>")
    resp = client.post("/api/parse", json={"url": article_url})
    assert resp.status_code == 404
    assert resp.json() == {"error": "未能找到文章封面，请确认链接是否正确"}


def test_article_timeout_is_408(client, fake_session, article_url):
    fake_session.get.side_effect = requests.ReadTimeout("slow")
    resp = client.post("/api/parse", json={"url": article_url})
    assert resp.status_code == 408
    assert resp.json() == {"error": "请求超时，请重试"}


def test_upstream_status_is_passed_through(client, fake_session, make_response, article_url):
    fake_session.get.return_value = make_response(403, "forbidden", url=article_url)
    resp = client.post("/api/parse", json={"url": article_url})
    assert resp.status_code == 403
    assert resp.json() == {"error": "无法访问该链接 (403)"}


def test_network_failure_is_500(client, fake_session, article_url):
    fake_session.get.side_effect = requests.ConnectionError("dns")
    resp = client.post("/api/parse", json={"url": article_url})
    assert resp.status_code == 500
    assert resp.json() == {"error": "解析失败，请检查链接是否正确或稍后重试"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_docs_json(client):
    resp = client.get("/api/docs.json")
    assert resp.status_code == 200
    body = resp.json()
    assert body["endpoints"]["parse"]["path"] == "/api/parse"
    assert body["baseUrl"] == "http://testserver"
    assert 404 in body["endpoints"]["parse"]["response"]["error"]["status"]
