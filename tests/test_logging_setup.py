import logging

import pytest

from tasklog.logging_setup import setup_logging


@pytest.fixture()
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_only(restore_root):
    setup_logging("WARNING")
    (handler,) = restore_root.handlers
    assert handler.level == logging.WARNING


def test_file_handler(restore_root, tmp_path):
    log_file = tmp_path / "logs" / "tasklog.log"
    setup_logging("INFO", str(log_file))
    logging.getLogger("tasklog.test").debug("written to file")
    for h in restore_root.handlers:
        h.flush()
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_third_party_noise_filtered(restore_root):
    setup_logging("DEBUG")
    (handler,) = restore_root.handlers
    noisy = logging.LogRecord("urllib3", logging.INFO, __file__, 1, "chatty", None, None)
    ours = logging.LogRecord("tasklog.dispatcher", logging.DEBUG, __file__, 1, "kept", None, None)
    assert not handler.filter(noisy)
    assert handler.filter(ours)
