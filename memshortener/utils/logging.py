"""JSON logging for request handlers and the short URL store

`initialize_logging()` runs once, when the `memshortener.lambdas` package is
imported. Every record goes to stdout as one JSON object per line. Fields
passed through `extra=` land at the top level next to the standard ones, and
records logged with `logger.exception()` carry the formatted traceback.

A handler outcome, e.g. from the JSON API:
{
    "timestamp": "2026-10-19T09:41:07.512Z",
    "level": "INFO",
    "logger": "memshortener.lambdas.shorten_url.app",
    "message": "Short URL created. Responding with 200.",
    "shortcode": "Xa81Kq",
    "event": "SHORTEN_SUCCESS"
}

A store collision that `ShortURLBaseDAO.create()` recovers from:
{
    "timestamp": "2026-10-19T09:41:07.514Z",
    "level": "WARNING",
    "logger": "memshortener.dao.base.short_url_base_dao",
    "message": "Shortcode collision. Drawing a new candidate.",
    "shortcode": "Xa81Kq",
    "attempt": 1
}

Log level comes from `LOG_LEVEL` (default `INFO`).
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from memshortener.constants import ENV


def utc_timestamp(created: float) -> str:
    """Render a LogRecord creation time as ISO-8601 UTC with millisecond precision, e.g. '2026-10-19T09:41:07.512Z'."""
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
