"""Process-wide logging setup and request id propagation"""
from datetime import datetime, timezone
import json
import logging
import sys

from flask import g, has_request_context

from src.core import Environment


REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamps every record with the id of the request being served"""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = NO_REQUEST_ID
        if has_request_context():
            request_id = g.get("request_id", NO_REQUEST_ID)
        record.request_id = request_id
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", NO_REQUEST_ID),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class PrettyFormatter(logging.Formatter):
    """Coloured level names for terminals"""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s", "%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        if color is None:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def configure_logging(env: Environment) -> logging.Logger:
    """
    Configure the root logger for an environment.

    local: coloured text at DEBUG, dev: JSON lines at DEBUG,
    prod: plain text at INFO. Calling it again replaces the handler.

    Args:
        env: Deployment environment

    Returns:
        The configured root logger
    """
    if env == Environment.LOCAL:
        formatter, level = PrettyFormatter(), logging.DEBUG
    elif env == Environment.DEV:
        formatter, level = JsonFormatter(), logging.DEBUG
    else:
        formatter, level = logging.Formatter(TEXT_FORMAT), logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return root
