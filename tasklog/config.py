"""Settings read from ``TASKLOG_*`` environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TASKLOG"


class ConfigError(RuntimeError):
    """A required setting is missing or unusable."""


def _k(suffix):
    return f"{ENV_PREFIX}_{suffix}"


def _env(name, default=None):
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name, default):
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    password: Optional[str]
    database: str = "tasklog.db"
    host: str = "0.0.0.0"
    port: int = 7777
    static_dir: Path = Path(".")
    secure_cookie: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_flask_config(self):
        return {
            "PASSWORD": self.password,
            "DATABASE": self.database,
            "STATIC_DIR": str(self.static_dir),
            "SECURE_COOKIE": self.secure_cookie,
        }


def load_settings():
    # No default password: create_app refuses to start without one.
    return Settings(
        password=os.getenv(_k("PASSWORD")),
        database=_env(_k("DATABASE"), "tasklog.db"),
        host=_env(_k("HOST"), "0.0.0.0"),
        port=_env_int(_k("PORT"), 7777),
        static_dir=Path(_env(_k("STATIC_DIR"), os.getcwd())).expanduser(),
        secure_cookie=_env_bool(_k("SECURE_COOKIE"), False),
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        log_file=_env(_k("LOG_FILE")),
    )
