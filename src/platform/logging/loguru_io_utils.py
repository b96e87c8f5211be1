from inspect import getfile, getsourcelines
from os.path import basename
from re import compile as re_compile
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


# Matches repr fragments such as password='secret' or "card_number": "4111..."
_SENSITIVE_PATTERN = re_compile(
    r"""(['"]?)(%s)\1(\s*[=:]\s*)(['"])(.*?)\4""" % '|'.join(sorted(SENSITIVE_KEYWORDS))
)

_MAX_CONTENT_LENGTH = 1000


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def reset_call_depth() -> None:
    depth = call_depth_var.get() - 1
    call_depth_var.set(depth)
    if not depth:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(func))}::{func.__qualname__}:{lineno}'


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_PATTERN.sub(r'\1\2\1\3\4********\4', data_str)
    return data if masked == data_str else masked


def truncate_content(content: Any) -> Any:
    content_str = str(content)
    if len(content_str) <= _MAX_CONTENT_LENGTH:
        return content
    return f'{content_str[:_MAX_CONTENT_LENGTH]}...(truncated {len(content_str)} chars)'


def render_content(data: Any) -> Any:
    """Masked, then truncated: what Logger.io writes for args and return values"""
    return truncate_content(mask_sensitive(data))
