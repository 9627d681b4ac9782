"""
Logging Configuration
Provides structured logging for route generation and resolution
"""
import json
import logging
import sys
from datetime import datetime
from typing import List, Optional


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
    }

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Additional fields to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed via logger.info(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    @staticmethod
    def setup_logger(
        name: str = 'routetree',
        format_type: str = 'json',
        level: int = logging.INFO,
        stream=None
    ) -> logging.Logger:
        """
        Setup a logger writing to a stream handler

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            level: Log level
            stream: Target stream (default: stderr)

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('routetree', format_type='text', level=logging.DEBUG)
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Clear existing handlers
        logger.handlers.clear()

        handler = logging.StreamHandler(stream or sys.stderr)
        if format_type == 'json':
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(LoggerConfig.TEXT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

        return logger
