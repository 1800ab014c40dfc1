import logging

from . import create_app
from .config import load_settings
from .logging_setup import setup_logging

log = logging.getLogger("tasklog")


def main():
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    app = create_app()
    log.info("Running Tasklog on http://%s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == '__main__':
    main()
