"""
Request classification: static assets and the route table.

Everything here is a pure function of the method and path. Headers, cookies
and bodies are never looked at.
"""

import enum
import re
from typing import NamedTuple, Optional

# Substrings, not suffixes: "/app.js.map" and "/less/site.less" both count.
STATIC_MARKERS = ("less", "js", ".webp", ".svg", ".png")


class RouteTag(enum.Enum):
    STATIC = "static"
    LIST_TASKS = "list_tasks"
    CREATE_TASK = "create_task"
    DELETE_TASK = "delete_task"
    ADD_ENTRY = "add_entry"
    VIEW_TASK = "view_task"
    DELETE_ENTRY = "delete_entry"
    LOGIN_FORM = "login_form"
    LOGIN_SUBMIT = "login_submit"
    UNKNOWN = "unknown"


class Route(NamedTuple):
    tag: RouteTag
    # Captured digits, left as a string for the repository to parse.
    ident: Optional[str] = None


# (method or None for any, anchored pattern, tag). First match wins.
# [0-9] rather than \d so only ASCII digits are captured.
ROUTE_TABLE = (
    ("GET", re.compile(r"/"), RouteTag.LIST_TASKS),
    ("POST", re.compile(r"/tasks"), RouteTag.CREATE_TASK),
    ("POST", re.compile(r"/tasks/del/([0-9]+)"), RouteTag.DELETE_TASK),
    ("POST", re.compile(r"/tasks/([0-9]+)/add-entry"), RouteTag.ADD_ENTRY),
    (None, re.compile(r"/tasks/([0-9]+)"), RouteTag.VIEW_TASK),
    (None, re.compile(r"/tasks/del-entry/([0-9]+)"), RouteTag.DELETE_ENTRY),
)


def is_static(path):
    """True when ``path`` should be answered from disk without a session check."""
    return any(marker in path for marker in STATIC_MARKERS)


def match_route(method, path):
    """Map ``(method, path)`` to a :class:`Route`; ``UNKNOWN`` when nothing fits.

    ``VIEW_TASK`` and ``DELETE_ENTRY`` accept any method, so a plain link can
    delete an entry.
    """
    for wanted, pattern, tag in ROUTE_TABLE:
        if wanted is not None and method != wanted:
            continue
        m = pattern.fullmatch(path)
        if m:
            return Route(tag, m.group(1) if m.groups() else None)
    return Route(RouteTag.UNKNOWN)


def login_route(method):
    """Anonymous requests: GET shows the form, anything else is a submission."""
    if method == "GET":
        return Route(RouteTag.LOGIN_FORM)
    return Route(RouteTag.LOGIN_SUBMIT)
