import json
from unittest.mock import MagicMock

import pytest
import requests

from checklist.api_client import ChecklistAPIError, ChecklistClient, NotFoundError


def _response(status=200, body=None, content=None):
    resp = requests.Response()
    resp.status_code = status
    if content is not None:
        resp._content = content
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return ChecklistClient(base_url="http://backend.test/", timeout=5, session=session)


def test_get_response_hits_record_path(api, session):
    session.request.return_value = _response(body={"data": {"x": 1}})
    assert api.get_response("abc") == {"data": {"x": 1}}
    session.request.assert_called_once_with("GET", "http://backend.test/api/responses/abc", timeout=5)


def test_get_pdf_returns_raw_bytes(api, session):
    session.request.return_value = _response(content=b"%PDF-1.7\x00\x01")
    assert api.get_response_pdf("abc") == b"%PDF-1.7\x00\x01"
    session.request.assert_called_once_with("GET", "http://backend.test/api/responses/abc/pdf", timeout=5)


def test_request_access_posts_json(api, session):
    session.request.return_value = _response(body={"success": True})
    assert api.request_access("a@b.c", "hi") == {"success": True}
    session.request.assert_called_once_with(
        "POST", "http://backend.test/api/responses/access-request",
        timeout=5, json={"email": "a@b.c", "message": "hi"},
    )


def test_404_is_not_found(api, session):
    session.request.return_value = _response(status=404)
    with pytest.raises(NotFoundError) as exc:
        api.get_response("missing")
    assert exc.value.status_code == 404


def test_server_error_is_wrapped(api, session):
    session.request.return_value = _response(status=500)
    with pytest.raises(ChecklistAPIError) as exc:
        api.get_response_pdf("abc")
    assert exc.value.status_code == 500
    assert not isinstance(exc.value, NotFoundError)


def test_transport_error_is_wrapped(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ChecklistAPIError):
        api.get_response("abc")


def test_non_json_body_is_wrapped(api, session):
    session.request.return_value = _response(content=b"<html>oops</html>")
    with pytest.raises(ChecklistAPIError):
        api.request_access("a@b.c", "")


def test_defaults_come_from_config(monkeypatch):
    from checklist import config
    monkeypatch.setattr(config, "API_BASE_URL", "http://configured")
    monkeypatch.setattr(config, "API_TIMEOUT", 12.0)
    c = ChecklistClient(session=MagicMock(spec=requests.Session))
    assert c.base_url == "http://configured"
    assert c.timeout == 12.0
