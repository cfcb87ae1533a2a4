"""
Logging Configuration and Utilities

Structured logging with structlog on top of the standard library,
JSON output through python-json-logger, and request context propagation.
"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from app.config.settings import settings

# Context variables for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
user_id: ContextVar[Optional[str]] = ContextVar('user_id', default=None)

SENSITIVE_KEYS = ('password', 'token', 'secret', 'authorization', 'cookie')


class RequestContextProcessor:
    """Add request context to structlog events"""

    def __call__(self, logger, method_name, event_dict):
        req_id = request_id.get()
        if req_id:
            event_dict['request_id'] = req_id

        uid = user_id.get()
        if uid:
            event_dict['user_id'] = uid

        event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        event_dict['service'] = 'hostel-desk'
        event_dict['environment'] = settings.ENVIRONMENT
        return event_dict


class SecurityLogProcessor:
    """Flag security events and mask sensitive values"""

    def __call__(self, logger, method_name, event_dict):
        if any(keyword in str(event_dict.get('event', '')).lower()
               for keyword in ('auth', 'login', 'permission', 'forbidden', 'token')):
            event_dict['security_event'] = True

        sanitize(event_dict)
        return event_dict


def sanitize(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mask values whose key looks like a credential, recursively."""
    for key in list(data.keys()):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            data[key] = '[REDACTED]'
        elif isinstance(data[key], dict):
            sanitize(data[key])
    return data


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        req_id = request_id.get()
        if req_id and 'request_id' not in log_record:
            log_record['request_id'] = req_id

        uid = user_id.get()
        if uid and 'user_id' not in log_record:
            log_record['user_id'] = uid

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        sanitize(log_record)


class LoggingConfig:
    """Centralized logging configuration"""

    @staticmethod
    def configure_structured_logging():
        """Configure structlog to hand events to the stdlib handlers"""
        processors = [
            structlog.contextvars.merge_contextvars,
            RequestContextProcessor(),
            SecurityLogProcessor(),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if settings.LOG_FORMAT == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def configure_standard_logging():
        """Configure standard Python logging"""
        level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if settings.LOG_FORMAT == "json":
            formatter = CustomJsonFormatter(
                '%(asctime)s %(name)s %(levelname)s %(message)s'
            )
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        LoggingConfig._configure_library_loggers()

    @staticmethod
    def _configure_library_loggers():
        """Reduce noise from external libraries"""
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.error").setLevel(logging.INFO)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("passlib").setLevel(logging.ERROR)

        if settings.DATABASE_ECHO:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
        else:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class LoggerAdapter:
    """Logger adapter carrying a fixed context into every record"""

    def __init__(self, logger: logging.Logger, **context: Any):
        self.logger = logger
        self._context: Dict[str, Any] = context

    def bind(self, **kwargs) -> "LoggerAdapter":
        return LoggerAdapter(self.logger, **{**self._context, **kwargs})

    def _log(self, level: int, message: str, *args, **kwargs):
        extra = {**self._context, **(kwargs.get('extra') or {})}
        kwargs['extra'] = extra
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get configured logger instance.

    Args:
        name: Logger name (defaults to 'hostel')

    Returns:
        Logger adapter
    """
    return LoggerAdapter(logging.getLogger(name or 'hostel'))


def get_struct_logger(name: Optional[str] = None):
    """Structlog logger bound to the stdlib logger of the same name."""
    return structlog.get_logger(name or 'hostel')


def setup_logging():
    """Initialize logging configuration"""
    LoggingConfig.configure_structured_logging()
    LoggingConfig.configure_standard_logging()

    get_logger(__name__).info("Logging system initialized", extra={
        'log_level': settings.LOG_LEVEL,
        'log_format': settings.LOG_FORMAT,
    })


__all__ = [
    'get_logger',
    'get_struct_logger',
    'setup_logging',
    'LoggerAdapter',
    'LoggingConfig',
    'CustomJsonFormatter',
    'request_id',
    'user_id',
]
