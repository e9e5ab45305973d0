import http.client
import json
import threading
import urllib.error
import urllib.request

import pytest

from groupme_bot import replies
from groupme_bot.config import load_settings
from groupme_bot.server import make_server

# Local requests must not go through any configured proxy.
_OPENER = urllib.request.build_opener(urllib.request.ProxyHandler({}))


@pytest.fixture
def base_url(monkeypatch):
    monkeypatch.setenv("GROUPME_BOT_ID", "bot-1")
    monkeypatch.setenv("GROUPME_GROUP_ID", "G1")
    monkeypatch.setenv("GROUPME_TEST_MODE", "true")
    monkeypatch.setenv("PORT", "0")
    server = make_server(load_settings(), host="127.0.0.1")
    t = threading.Thread(target=server.serve_forever, daemon=True)
    t.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _call(url, data=None, method=None):
    req = urllib.request.Request(url, data=data, method=method)
    try:
        with _OPENER.open(req, timeout=5) as resp:
            return resp.status, resp.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        return e.code, e.read().decode("utf-8")


def test_health(base_url):
    assert _call(base_url + "/health") == (200, "OK")


def test_callback_post(base_url, caplog):
    caplog.set_level("INFO", logger="groupme_bot.groupme")
    body = json.dumps({"text": "guest parking code", "sender_type": "user", "group_id": "G1"})
    status, text = _call(base_url + "/", data=body.encode("utf-8"), method="POST")
    assert (status, text) == (200, "OK")
    assert replies.GUEST_PARKING_TEXT in caplog.text


def test_callback_bad_json(base_url):
    status, _ = _call(base_url + "/", data=b"{nope", method="POST")
    assert status == 400


def test_callback_wrong_method(base_url):
    assert _call(base_url + "/")[0] == 405


def test_scheduled(base_url):
    assert _call(base_url + "/scheduled") == (200, "Weekly suggestion sent")


def test_scheduled_delivery_failure(monkeypatch):
    monkeypatch.setenv("GROUPME_BOT_ID", "bot-1")
    monkeypatch.setenv("GROUPME_GROUP_ID", "G1")
    monkeypatch.setenv("GROUPME_API_URL", "http://127.0.0.1:1/v3/bots/post")
    monkeypatch.delenv("GROUPME_TEST_MODE", raising=False)
    monkeypatch.setenv("PORT", "0")
    server = make_server(load_settings(), host="127.0.0.1")
    t = threading.Thread(target=server.serve_forever, daemon=True)
    t.start()
    try:
        status, _ = _call(f"http://127.0.0.1:{server.server_address[1]}/scheduled")
    finally:
        server.shutdown()
        server.server_close()
    assert status == 500


def test_callback_bad_content_length(base_url):
    host, port = base_url[len("http://") :].split(":")
    conn = http.client.HTTPConnection(host, int(port), timeout=5)
    try:
        conn.putrequest("POST", "/")
        conn.putheader("Content-Length", "abc")
        conn.endheaders()
        resp = conn.getresponse()
        assert (resp.status, resp.read()) == (400, b"Bad request")
    finally:
        conn.close()
