import json
import logging
import sys
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.settings import Settings

AUDIT_LOGGER_NAME = 'currency.audit'


class JSONFormatter(logging.Formatter):
    """
    Renders each record as one JSON object per line. Structured payloads passed
    as ``extra={'extra_data': {...}}`` end up under ``data``.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_data'):
            log_entry['data'] = record.extra_data

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _console_handler(level: int, label: str = '') -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    console_format = f'%(asctime)s |{label} %(levelname)-8s | %(name)-20s | %(message)s'
    handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
    return handler


def _file_handler(path: Path, level: int, max_file_size: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=max_file_size,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def configure_logging(settings: Settings,
                      max_file_size: int = 10 * 1024 * 1024,
                      backup_count: int = 5) -> None:
    """
    Wire the root and audit loggers.

    With LOG_PATH set, records also go to a rotating JSON file; an empty
    LOG_PATH keeps everything on stdout, which is what containers expect.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    logging.getLogger('httpx').setLevel(logging.WARNING)

    root_logger.addHandler(_console_handler(level))

    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    audit_logger.handlers.clear()
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False

    if settings.LOG_PATH:
        # root_logger's own level filters application records; the handler
        # must still pass INFO audit records whatever LOG_LEVEL says
        file_handler = _file_handler(
            Path(settings.LOG_PATH), min(level, logging.INFO), max_file_size, backup_count
        )
        root_logger.addHandler(file_handler)
        audit_logger.addHandler(file_handler)
        audit_logger.addHandler(_console_handler(logging.INFO, label=' AUDIT |'))
    else:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(JSONFormatter())
        audit_logger.addHandler(stdout_handler)
