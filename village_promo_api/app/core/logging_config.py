"""
Logging setup for the village promotion API.

``create_app`` calls :func:`setup_logging` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Every module then logs through
``logging.getLogger(__name__)``: services record category and business
changes at INFO, orphaned or unknown categories at WARNING, and
storage failures with their traceback at ERROR.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, so building
    the app more than once in a process (as the test suite does) does
    not duplicate output.  An unknown ``level`` name falls back to INFO.
    The directory of ``logfile`` is created if it does not exist.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # One line per request is too chatty at INFO.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
