# todo_api/core/logging.py
"""
Logging setup.
Application loggers live under the `todo_api` namespace; server-facing
messages go through uvicorn's `uvicorn.error` logger.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a stream handler to the `todo_api` logger tree and set its level.
    Safe to call more than once.
    """
    app_logger = logging.getLogger("todo_api")
    app_logger.setLevel(level.upper())
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
