"""Unit tests for logging initialization in logging.py

Test coverage includes:
    - JsonFormatter renders timestamp, level, logger and message as JSON.
    - Correlation extras (event, slug, errorCode) sit at the top level, other extras under `context`.
    - JsonFormatter adds the service name and renders exceptions.
    - initialize_logging() configures the root logger from its argument or LOG_LEVEL.
"""

import json
import logging
import sys
from datetime import datetime, UTC

import pytest

from slugstore.utils.logging import JsonFormatter, initialize_logging


def make_record(msg: str, level: int = logging.INFO, exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord('slugstore.test', level, __file__, 1, msg, (), exc_info)
    record.__dict__.update(extra)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def test_json_formatter_renders_base_fields():
    record = make_record('Created identity record.')
    record.created = datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC).timestamp()

    log = json.loads(JsonFormatter().format(record))

    assert log == {
        'timestamp': '2026-10-19T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'slugstore.test',
        'message': 'Created identity record.',
    }


def test_json_formatter_lifts_correlation_fields():
    record = make_record(
        'Created slug. Responding with 200.',
        event='SLUG_CREATED',
        slug='01JA8Q6W3M2ZB0S6QX1V9C4T7N',
        errorCode=None,
        ttl=3600,
        userType='resident',
    )

    log = json.loads(JsonFormatter().format(record))

    assert log['event'] == 'SLUG_CREATED'
    assert log['slug'] == '01JA8Q6W3M2ZB0S6QX1V9C4T7N'
    assert 'errorCode' in log
    assert log['context'] == {'ttl': 3600, 'userType': 'resident'}
    assert 'msg' not in log and 'args' not in log


def test_json_formatter_adds_service():
    log = json.loads(JsonFormatter(service='slugstore:test').format(make_record('Found slug.')))
    assert log['service'] == 'slugstore:test'


def test_json_formatter_renders_exceptions():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record('Failed.', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['level'] == 'ERROR'
    assert 'RuntimeError: boom' in log['exception']
    assert 'context' not in log


def test_json_formatter_stringifies_unserializable_extras():
    log = json.loads(JsonFormatter().format(make_record('Odd extra.', odd=object())))
    assert log['context']['odd'].startswith('<object object at')


# -------------------------------
# 2. initialize_logging
# -------------------------------


@pytest.fixture
def _restore_loggers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    botocore_level = logging.getLogger('botocore').level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger('botocore').setLevel(botocore_level)


@pytest.mark.usefixtures('_restore_loggers')
def test_initialize_logging_from_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('APP_NAME', 'slugstore')
    monkeypatch.setenv('APP_ENV', 'test')

    initialize_logging()

    root = logging.getLogger()
    formatters = [handler.formatter for handler in root.handlers if isinstance(handler.formatter, JsonFormatter)]
    assert root.level == logging.DEBUG
    assert formatters and formatters[0].service == 'slugstore:test'
    assert logging.getLogger('botocore').level == logging.WARNING


@pytest.mark.usefixtures('_restore_loggers')
def test_initialize_logging_with_explicit_level(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    initialize_logging('error')

    assert logging.getLogger().level == logging.ERROR
