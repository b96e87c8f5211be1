"""
API Gateway error mapping

Turns any exception escaping a use case into a Lambda proxy response.
Lookup walks the exception's MRO, so the most specific handler wins.
"""

from typing import Any, Callable, Dict

from pydantic import ValidationError as RequestValidationError

from src.platform.exception.exceptions import CustomBaseError
from src.platform.message_codec import MessageCodec


LambdaResponse = Dict[str, Any]
ExceptionHandler = Callable[[Exception], LambdaResponse]

RESPONSE_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}


def json_response(*, status_code: int, body: Any) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': dict(RESPONSE_HEADERS),
        'body': MessageCodec.encode_message(data=body),
    }


def custom_error_handler(exc: Exception) -> LambdaResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return json_response(status_code=error.status_code, body={'detail': error.message})


def validation_error_handler(exc: Exception) -> LambdaResponse:
    if not isinstance(exc, RequestValidationError):
        return json_response(status_code=400, body={'detail': str(exc)})
    return json_response(
        status_code=400,
        body={'detail': exc.errors(include_url=False, include_context=False, include_input=False)},
    )


def general_500_exception_handler(exc: Exception) -> LambdaResponse:
    return json_response(status_code=500, body={'detail': 'Internal server error'})


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def handle_exception(exc: Exception) -> LambdaResponse:
    for exc_type in type(exc).__mro__:
        handler = EXCEPTION_HANDLERS.get(exc_type)
        if handler:
            return handler(exc)
    return general_500_exception_handler(exc)
