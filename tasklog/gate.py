"""The session gate: one cookie decides whether a request is logged in."""

import enum
import hmac

COOKIE_NAME = "loggedIn"
COOKIE_VALUE = "1"


class SessionState(enum.Enum):
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


def session_state(cookies):
    """``AUTHENTICATED`` only when the ``loggedIn`` cookie is exactly ``"1"``."""
    if cookies.get(COOKIE_NAME) == COOKIE_VALUE:
        return SessionState.AUTHENTICATED
    return SessionState.ANONYMOUS


def check_password(submitted, expected):
    if submitted is None or not expected:
        return False
    return hmac.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))
