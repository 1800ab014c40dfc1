"""
Top-level request handling.

A :class:`Dispatcher` turns one request into one response. It holds no state
of its own beyond its collaborators, so one instance serves every request.
"""

import logging
from urllib.parse import urlsplit

from . import responses
from .gate import SessionState, check_password, session_state
from .routing import Route, RouteTag, is_static, login_route, match_route

log = logging.getLogger(__name__)


def strip_leading_slash(path):
    return path[1:] if path.startswith("/") else path


def referer_target(request):
    """Where to send the client back to after deleting an entry.

    Falls back to ``/`` when there is no Referer or it names another host.
    """
    referer = request.headers.get("Referer")
    if not referer:
        return "/"
    parts = urlsplit(referer)
    if parts.netloc and parts.netloc != request.host:
        return "/"
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"
    return target


class Dispatcher:

    def __init__(self, tasks, entries, render, serve_static, password, secure_cookie=False):
        self.tasks = tasks
        self.entries = entries
        self.render = render
        self.serve_static = serve_static
        self.password = password
        self.secure_cookie = secure_cookie

        self._handlers = {
            RouteTag.STATIC: self.static,
            RouteTag.LOGIN_FORM: self.login_form,
            RouteTag.LOGIN_SUBMIT: self.login,
            RouteTag.LIST_TASKS: self.list_tasks,
            RouteTag.CREATE_TASK: self.create_task,
            RouteTag.DELETE_TASK: self.delete_task,
            RouteTag.ADD_ENTRY: self.add_entry,
            RouteTag.VIEW_TASK: self.view_task,
            RouteTag.DELETE_ENTRY: self.delete_entry,
        }

    def __call__(self, request):
        path = request.path

        # Static assets are public, so the gate is not consulted for them.
        if is_static(path):
            route = Route(RouteTag.STATIC)
        elif session_state(request.cookies) is SessionState.AUTHENTICATED:
            route = match_route(request.method, path)
        else:
            route = login_route(request.method)

        handler = self._handlers.get(route.tag)
        if handler is None:
            log.debug("no route for %s %s", request.method, path)
            return responses.not_found()
        return handler(request, route.ident)

    def static(self, request, _ident):
        log.debug("static %s", request.path)
        return self.serve_static(strip_leading_slash(request.path))

    # ------------------------ Login ------------------------

    def login_form(self, request, _ident):
        return responses.html(self.render("login", {}))

    def login(self, request, _ident):
        if check_password(request.form.get("password"), self.password):
            log.info("login accepted from %s", request.remote_addr)
            body = self.render("tasks", {"tasks": self.tasks.list()})
            return responses.with_login_cookie(body, secure=self.secure_cookie)
        log.warning("login rejected from %s", request.remote_addr)
        return responses.redirect("/")

    # ------------------------ Tasks ------------------------

    def list_tasks(self, request, _ident):
        return responses.html(self.render("tasks", {"tasks": self.tasks.list()}))

    def create_task(self, request, _ident):
        self.tasks.create(request.form.get("name", ""))
        return responses.redirect("/")

    def delete_task(self, request, task_id):
        self.tasks.delete(task_id)
        return responses.redirect("/")

    # ------------------------ Entries ------------------------

    def add_entry(self, request, task_id):
        self.entries.create(task_id, request.form.get("description", ""))
        return responses.redirect(f"/tasks/{task_id}")

    def view_task(self, request, task_id):
        data = {
            "task": self.entries.task_name(task_id),
            "entries": self.entries.for_task(task_id),
        }
        return responses.html(self.render("task", data))

    def delete_entry(self, request, entry_id):
        self.entries.delete(entry_id)
        return responses.redirect(referer_target(request))
