"""Application-wide logging initialization

IMPORTANT: `initialize_logging()` runs in each lambda package's `__init__.py`,
before any other logging is done.

Every line on stdout is one JSON document. The fields used to correlate a
slug's lifecycle across the create and lookup functions (`event`, `slug`,
`errorCode`) sit at the top level, next to the `service` the line came from.
Any other `extra` field is grouped under `context`:
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "slugstore.lambdas.create_slug.app",
    "message": "Created slug. Responding with 200.",
    "service": "slugstore:dev",
    "event": "SLUG_CREATED",
    "slug": "01JA8Q6W3M2ZB0S6QX1V9C4T7N",
    "context": {"userType": "resident", "action": "smsConsent", "ttl": 3600}
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from slugstore.constants import ENV
from slugstore.utils.config import app_prefix


# Attributes every LogRecord carries, i.e. everything that isn't an `extra`
RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))) | {'message', 'asctime'}

# Extras promoted to the top level of a log line
CORRELATION_FIELDS = ('event', 'slug', 'errorCode')

# Chatty third-party loggers (SSM lookups go through boto3)
QUIET_LOGGERS = ('boto3', 'botocore', 'urllib3')


class JsonFormatter(logging.Formatter):
    """Render LogRecords as single-line JSON documents

    Args:
        service (str | None):
            Service name added to every line, e.g. 'slugstore:dev'. Omitted if None.
    """

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if self.service is not None:
            log['service'] = self.service

        extras = {key: value for key, value in vars(record).items() if key not in RECORD_ATTRS}
        for field in CORRELATION_FIELDS:
            if field in extras:
                log[field] = extras.pop(field)
        if extras:
            log['context'] = extras

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Send JSON logs of all loggers to stdout

    Args:
        level (str | None):
            Root log level. Defaults to `LOG_LEVEL`, or INFO if that isn't set.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'service': app_prefix(),
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in QUIET_LOGGERS},
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
