"""Tasklog: a password-gated personal task log."""

import logging
from pathlib import Path

from flask import Flask, request, send_from_directory
from werkzeug.exceptions import MethodNotAllowed

from . import db
from .config import ConfigError, load_settings
from .dispatcher import Dispatcher
from .repository import EntryRepository, TaskRepository
from .templates import LOADER, render

log = logging.getLogger(__name__)

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(test_config=None):
    # static_folder=None: the dispatcher decides what is static, not Flask.
    app = Flask(__name__, static_folder=None)
    app.config.update(load_settings().to_flask_config())
    if test_config is not None:
        app.config.update(test_config)

    if not app.config.get("PASSWORD"):
        raise ConfigError("TASKLOG_PASSWORD is not set")

    app.jinja_loader = LOADER
    db.init_app(app)

    static_dir = Path(app.config["STATIC_DIR"]).resolve()

    def serve_static(relative_path):
        return send_from_directory(static_dir, relative_path)

    dispatcher = Dispatcher(
        tasks=TaskRepository(),
        entries=EntryRepository(),
        render=render,
        serve_static=serve_static,
        password=app.config["PASSWORD"],
        secure_cookie=app.config.get("SECURE_COOKIE", False),
    )
    app.extensions["tasklog.dispatcher"] = dispatcher

    def handle(path=""):
        return dispatcher(request)

    # Every method reaches the dispatcher, OPTIONS included.
    app.add_url_rule("/", "handle", handle, methods=METHODS, provide_automatic_options=False)
    app.add_url_rule("/<path:path>", "handle", handle, methods=METHODS,
                     provide_automatic_options=False)

    @app.errorhandler(MethodNotAllowed)
    def handle_other_method(_exc):
        return dispatcher(request)

    log.debug("app ready, database=%s static=%s", app.config["DATABASE"], static_dir)
    return app
