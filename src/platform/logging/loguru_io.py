"""
``Logger.io``: input/output logging for domain, use-case and adapter calls

Every decorated call logs its masked arguments and return value at DEBUG
(only when ``settings.DEBUG``) and logs an escaping exception once, at the
innermost decorated frame, before re-raising it.
"""

from functools import wraps
from inspect import iscoroutinefunction
from typing import Any, Callable, TypeVar, cast

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, call_depth_var, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    render_content,
    reset_call_depth,
)


_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    # enter/leave/failed -> wrapper -> decorated call site
    depth = 2

    def __init__(self, func: Callable[..., Any]) -> None:
        self.call_target = build_call_target_func_path(func)

    def _bound(self) -> Any:
        return custom_logger.bind(
            **{
                ExtraField.CALL_TARGET: self.call_target,
                ExtraField.CHAIN_START_TIME: get_chain_start_time(),
            }
        ).opt(depth=self.depth)

    def enter(self, args: tuple, kwargs: dict) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        if settings.DEBUG:
            self._bound().debug(f'args: {render_content(args)}, kwargs: {render_content(kwargs)}')

    def leave(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._bound().debug(f'return: {render_content(return_value)}')

    def failed(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            self._bound().error(f'{type(e).__name__}: {e}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')


def _io(func: _F) -> _F:
    io = LoguruIO(func)

    if iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            io.enter(args, kwargs)
            try:
                return_value = await func(*args, **kwargs)
                io.leave(return_value)
                return return_value
            except Exception as e:
                io.failed(e)
                raise
            finally:
                reset_call_depth()

        return cast(_F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        io.enter(args, kwargs)
        try:
            return_value = func(*args, **kwargs)
            io.leave(return_value)
            return return_value
        except Exception as e:
            io.failed(e)
            raise
        finally:
            reset_call_depth()

    return cast(_F, sync_wrapper)


class Logger:
    base = custom_logger
    io = staticmethod(_io)
