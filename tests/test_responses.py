from tasklog import responses


def test_redirect():
    r = responses.redirect("/tasks/7")
    assert r.status_code == 303
    assert r.headers["Location"] == "/tasks/7"
    assert r.get_data() == b""
    assert "Set-Cookie" not in r.headers


def test_with_login_cookie():
    r = responses.with_login_cookie(b"<tasks>")
    assert r.status_code == 200
    assert r.headers["Content-Type"] == "text/html; charset=UTF-8"
    cookie = r.headers["Set-Cookie"]
    assert cookie.startswith("loggedIn=1;")
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "Secure" not in cookie
    assert r.get_data() == b"<tasks>"


def test_with_login_cookie_secure():
    r = responses.with_login_cookie(b"", secure=True)
    assert "Secure" in r.headers["Set-Cookie"]


def test_not_found():
    r = responses.not_found()
    assert r.status_code == 404
    assert r.get_data() == b"Not found"


def test_html():
    r = responses.html(b"<p>hi</p>")
    assert r.status_code == 200
    assert r.headers["Content-Type"] == "text/html; charset=UTF-8"
