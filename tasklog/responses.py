from werkzeug.wrappers import Response

from .gate import COOKIE_NAME, COOKIE_VALUE

HTML_CONTENT_TYPE = "text/html; charset=UTF-8"


def html(body, status=200):
    return Response(body, status=status, content_type=HTML_CONTENT_TYPE)


def redirect(location):
    """303 with an empty body, so the client follows up with a GET."""
    response = Response(b"", status=303, content_type=HTML_CONTENT_TYPE)
    response.headers["Location"] = location
    return response


def with_login_cookie(body, secure=False):
    """The only response that ever sets the login cookie."""
    response = html(body)
    response.set_cookie(COOKIE_NAME, COOKIE_VALUE, path="/", httponly=True, secure=secure)
    return response


def not_found():
    return Response("Not found", status=404, content_type="text/plain; charset=UTF-8")
