import logging
import sys
from pathlib import Path


class _AccessLogFilter(logging.Filter):
    """App logs and werkzeug access lines pass; other libraries only at WARNING+."""

    def filter(self, record):
        if record.name == "tasklog" or record.name.startswith("tasklog."):
            return True
        if record.name == "werkzeug":
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


def setup_logging(level="INFO", log_file=None):
    """
    Configure the root logger with a console handler and, when ``log_file``
    is given, a file handler that receives everything.

    Call once at startup, before the app is built.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_AccessLogFilter())
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
