"""
loguru configuration

Lambda ships whatever the function writes to stdout to CloudWatch Logs, and
freezes the process as soon as the handler returns. The stdout sink is
therefore synchronous and flushes every line.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import Any

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'card_number',
    'cardNumber',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


io_log_format = ' | '.join(
    (
        f'{{extra[{ExtraField.SERVICE_CONTEXT}]}}',
        '{level:<8}',
        f'{{file}}::{{function}}:{{line}}=>{{extra[{ExtraField.CALL_TARGET}]}}',
        '{message}',
        '{elapsed}',
        f'{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}',
    )
)


def _stdout_sink(message: Any) -> None:
    # Looked up per write so a replaced sys.stdout (runtime, test capture) is honoured
    sys.stdout.write(message)
    sys.stdout.flush()


class InterceptHandler(logging.Handler):
    """Route stdlib ``logging`` records (boto3, botocore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # botocore dumps wire traffic and credential lookups at DEBUG
        if record.name.startswith(('botocore', 'boto3', 'urllib3')) and record.levelno <= logging.DEBUG:
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


loguru_logger.remove()
custom_logger = loguru_logger.bind(
    **{
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

custom_logger.add(_stdout_sink, format=io_log_format, level=min_log_level)

if settings.LOG_FILE_ENABLED:
    # Local runs only; the Lambda filesystem is read-only outside /tmp
    log_dir = os.environ.get('TEST_LOG_DIR', LOG_DIR)
    custom_logger.add(
        f'{log_dir}/{datetime.now(timezone.utc).strftime("%Y-%m-%d_%H")}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
