import pytest

from core.cors import build_cors_headers


def test_wildcard_when_unconfigured():
    headers = build_cors_headers("https://anything.test", None)
    assert headers["Access-Control-Allow-Origin"] == "*"


def test_empty_setting_means_wildcard():
    assert build_cors_headers(None, "")["Access-Control-Allow-Origin"] == "*"


def test_matching_origin_is_echoed():
    headers = build_cors_headers("https://example.com", "https://example.com")
    assert headers["Access-Control-Allow-Origin"] == "https://example.com"


@pytest.mark.parametrize("origin", ["https://evil.com", None, "https://example.com/", "http://example.com"])
def test_other_origins_get_no_allow_origin(origin):
    headers = build_cors_headers(origin, "https://example.com")
    assert "Access-Control-Allow-Origin" not in headers
    assert headers["Vary"] == "Origin"


def test_fixed_headers():
    headers = build_cors_headers(None, None)
    assert headers["Vary"] == "Origin"
    assert headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"
    assert headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization, X-Admin-Token"
    assert headers["Access-Control-Max-Age"] == "86400"


@pytest.mark.parametrize("path", ["/api/messages", "/admin", "/anything/else"])
def test_preflight_on_any_path(client, path):
    response = client.options(path, headers={"Origin": "https://site.test"})
    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-max-age"] == "86400"


def test_disallowed_origin_response_has_no_allow_origin(make_client):
    client = make_client(ALLOWED_ORIGIN="https://example.com")
    response = client.post(
        "/api/messages",
        json={"name": "Al", "email": "a@b.com", "message": "hi there"},
        headers={"Origin": "https://evil.com"},
    )
    assert response.status_code == 201
    assert "access-control-allow-origin" not in response.headers
    assert response.headers["vary"] == "Origin"


def test_allowed_origin_is_echoed_on_responses(make_client):
    client = make_client(ALLOWED_ORIGIN="https://example.com")
    response = client.get("/nowhere", headers={"Origin": "https://example.com"})
    assert response.headers["access-control-allow-origin"] == "https://example.com"


def test_error_responses_carry_cors_headers(client):
    response = client.post("/api/messages", content="x", headers={"Content-Type": "text/plain"})
    assert response.status_code == 415
    assert response.headers["access-control-allow-origin"] == "*"


def test_admin_page_has_no_cors_headers(client, admin_headers):
    response = client.get("/admin", headers=admin_headers)
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-methods" not in response.headers


def test_preflight_from_other_origin_omits_allow_origin(make_client):
    client = make_client(ALLOWED_ORIGIN="https://example.com")
    response = client.options(
        "/api/messages",
        headers={"Origin": "https://evil.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 204
    assert "access-control-allow-origin" not in response.headers
    assert response.headers["vary"] == "Origin"
    assert response.headers["access-control-allow-methods"] == "GET,POST,OPTIONS"
