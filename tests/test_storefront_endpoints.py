from dataclasses import replace

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from conftest import login, signup
from main import create_app
from services.auth_service.repository import UserRepository
from shared.security import limiter


def test_index_lists_seeded_products(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Go T-Shirt" in r.text
    assert "Go Mug" in r.text
    assert "$19.99" in r.text
    assert "Hello," not in r.text


def test_signup_login_cart_scenario(client):
    r = signup(client, "alice", "secret1")
    assert r.status_code == 303
    assert r.headers["location"] == "/login"

    r = login(client, "alice", "secret1")
    assert r.status_code == 303
    assert r.headers["location"] == "/"
    assert r.cookies["username"] == "alice"
    assert "HttpOnly" in r.headers["set-cookie"]

    r = client.get("/")
    assert "Hello, alice" in r.text

    r = client.get("/product?id=1")
    assert r.status_code == 200
    assert "Go T-Shirt" in r.text
    assert "Add to cart" in r.text

    r = client.post("/product?id=1", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/cart"

    r = client.get("/cart")
    assert r.status_code == 200
    assert "Go T-Shirt" in r.text
    assert "$19.99" in r.text


def test_failed_login_sets_no_cookie(client):
    signup(client, "alice", "secret1")

    r = login(client, "alice", "wrongpass")
    assert r.status_code == 200
    assert "Invalid credentials!" in r.text
    assert "set-cookie" not in r.headers
    assert "username" not in client.cookies


def test_unknown_user_gets_same_login_error(client):
    signup(client, "alice", "secret1")
    wrong_password = login(client, "alice", "wrongpass")
    unknown_user = login(client, "nobody", "secret1")
    assert wrong_password.status_code == unknown_user.status_code == 200
    assert "Invalid credentials!" in wrong_password.text
    assert "Invalid credentials!" in unknown_user.text


def test_duplicate_signup_rerenders_form(client):
    signup(client, "alice", "secret1")
    r = signup(client, "alice", "another")
    assert r.status_code == 200
    assert "Username already taken!" in r.text


def test_signup_store_failure_shows_generic_error(client, monkeypatch):
    async def broken_create(db, user):
        raise OperationalError("INSERT INTO users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(UserRepository, "create", staticmethod(broken_create))
    r = signup(client, "bob", "secret1")
    assert r.status_code == 200
    assert "Could not create your account" in r.text
    assert "already taken" not in r.text


def test_non_latin1_username_can_log_in(client):
    assert signup(client, "李雷", "secret1").status_code == 303
    r = login(client, "李雷", "secret1")
    assert r.status_code == 303

    assert "Hello, 李雷" in client.get("/").text
    client.post("/product?id=1", follow_redirects=False)
    assert "Go T-Shirt" in client.get("/cart").text


def test_signup_with_nul_in_password_rerenders_form(client):
    r = signup(client, "bob", "sec\x00ret")
    assert r.status_code == 200
    assert "Password contains characters that are not allowed" in r.text
    assert login(client, "bob", "sec\x00ret").status_code == 200


def test_cart_without_session_redirects_to_login(client):
    r = client.get("/cart", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login"


def test_cart_with_cookie_for_unknown_user_redirects_to_login(client):
    client.cookies.set("username", "ghost")
    r = client.get("/cart", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login"

    r = client.post("/product?id=1", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/login"


def test_plain_cookie_is_trusted_as_is(client):
    signup(client, "alice", "secret1")
    client.cookies.set("username", "alice")

    r = client.post("/product?id=2", follow_redirects=False)
    assert r.status_code == 303
    assert "Go Mug" in client.get("/cart").text


def test_adding_same_product_twice_lists_two_rows(client):
    signup(client, "alice", "secret1")
    login(client, "alice", "secret1")
    client.post("/product?id=2", follow_redirects=False)
    client.post("/product?id=2", follow_redirects=False)

    assert client.get("/cart").text.count("Go Mug") == 2
    assert "You have 2 in your cart." in client.get("/product?id=2").text


def test_post_product_without_session_renders_detail(client):
    r = client.post("/product?id=1", follow_redirects=False)
    assert r.status_code == 200
    assert "Go T-Shirt" in r.text
    assert "Log in" in r.text


def test_unknown_or_invalid_product_id_is_404(client):
    assert client.get("/product?id=99").status_code == 404
    assert client.get("/product?id=abc").status_code == 404
    assert client.get("/product").status_code == 404
    assert client.get("/product?id=99999999999999999999999").status_code == 404
    assert client.get("/product?id=-99999999999999999999999").status_code == 404

    signup(client, "alice", "secret1")
    login(client, "alice", "secret1")
    r = client.post("/product?id=99", follow_redirects=False)
    assert r.status_code == 404
    assert client.post("/product?id=99999999999999999999999", follow_redirects=False).status_code == 404
    assert "Your cart is empty." in client.get("/cart").text


def test_logout_clears_cookie(client):
    signup(client, "alice", "secret1")
    login(client, "alice", "secret1")

    r = client.get("/logout", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/"
    assert "Max-Age=0" in r.headers["set-cookie"]

    assert client.get("/cart", follow_redirects=False).status_code == 303


def test_static_assets_served(client):
    r = client.get("/static/style.css")
    assert r.status_code == 200
    assert "text/css" in r.headers["content-type"]


def test_health_reports_database(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"service": "storefront", "status": "running", "database": True}


def test_signed_session_round_trip(signed_client):
    signup(signed_client, "alice", "secret1")
    r = login(signed_client, "alice", "secret1")
    token = r.cookies["username"]
    assert token != "alice"
    assert token.count(".") == 2

    signed_client.post("/product?id=1", follow_redirects=False)
    r = signed_client.get("/cart")
    assert r.status_code == 200
    assert "Go T-Shirt" in r.text


def test_signed_mode_ignores_forged_cookie(signed_client):
    signup(signed_client, "alice", "secret1")
    signed_client.cookies.set("username", "alice")

    assert "Hello, alice" not in signed_client.get("/").text
    assert signed_client.get("/cart", follow_redirects=False).status_code == 303


def _limited_app(settings, enabled=True):
    return create_app(replace(settings, rate_limit_enabled=enabled))


def test_login_is_rate_limited(settings):
    limiter.reset()
    with TestClient(_limited_app(settings)) as c:
        statuses = [login(c, "alice", "nope").status_code for _ in range(11)]
    limiter.reset()
    assert statuses[:10] == [200] * 10
    assert statuses[10] == 429


def test_disabling_rate_limit_in_one_app_leaves_others_limited(settings, tmp_path):
    limiter.reset()
    limited = _limited_app(settings)
    unlimited = _limited_app(replace(settings, database_url=f"sqlite+aiosqlite:///{tmp_path / 'other.db'}"), enabled=False)
    with TestClient(unlimited) as u, TestClient(limited) as c:
        assert all(login(u, "alice", "nope").status_code == 200 for _ in range(11))
        statuses = [login(c, "alice", "nope").status_code for _ in range(11)]
    limiter.reset()
    assert statuses[10] == 429


def test_metrics_endpoint_when_enabled(settings):
    with TestClient(create_app(replace(settings, metrics_enabled=True))) as c:
        c.get("/")
        r = c.get("/metrics")
    assert r.status_code == 200
    assert "http_requests_total" in r.text
    assert "http_request_duration_seconds" in r.text
    assert 'handler="/"' in r.text
    assert "shop_login_total" in r.text
