"""
Lambda boundary helpers

``api_gateway_handler`` turns an async ``(event, context) -> body`` function
into a synchronous API Gateway proxy handler: the coroutine runs under
``anyio.run`` and every exception is mapped by ``handle_exception``.
"""

import base64
import binascii
from functools import wraps
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type, TypeVar

import anyio
from pydantic import BaseModel

from src.platform.exception.exception_handlers import (
    LambdaResponse,
    handle_exception,
    json_response,
)
from src.platform.exception.exceptions import ValidationError
from src.platform.message_codec import MessageCodec


_M = TypeVar('_M', bound=BaseModel)

AsyncLambdaFunc = Callable[[Dict[str, Any], Any], Awaitable[Any]]
LambdaHandler = Callable[[Dict[str, Any], Any], LambdaResponse]


def parse_request_body(event: Dict[str, Any], schema: Type[_M]) -> _M:
    """
    Raises:
        ValidationError: Body missing, or base64 body not decodable to UTF-8
        pydantic.ValidationError: Body does not match ``schema``
    """
    body: Optional[str] = event.get('body')
    if not body:
        raise ValidationError('Request body is required')
    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            raise ValidationError('Request body is not valid UTF-8') from None
    return schema.model_validate_json(body)


def api_gateway_handler(*, status_code: int = 200) -> Callable[[AsyncLambdaFunc], LambdaHandler]:
    def decorator(func: AsyncLambdaFunc) -> LambdaHandler:
        @wraps(func)
        def handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
            try:
                body = anyio.run(func, event, context)
            except Exception as exc:
                return handle_exception(exc)
            return json_response(status_code=status_code, body=body)

        return handler

    return decorator


def parse_event_bridge_event(event: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Return ``(detail-type, detail)`` from an EventBridge delivery."""
    detail = event.get('detail') or {}
    if isinstance(detail, (str, bytes)):
        detail = MessageCodec.decode_message(raw_data=detail)
    return event.get('detail-type', ''), detail
