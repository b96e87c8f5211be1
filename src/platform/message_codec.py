from decimal import Decimal
from typing import Any, Dict

import orjson


def _default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        # Integral amounts stay integers on the wire, everything else becomes a JSON number
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


class MessageCodec:
    """JSON encoding shared by the Lambda boundary and the event bus adapter.

    orjson handles datetime, enums and plain containers natively; Decimal
    (money amounts, DynamoDB numbers) goes through ``_default``.
    """

    @staticmethod
    def encode_message(*, data: Any) -> str:
        return orjson.dumps(data, default=_default).decode()

    @staticmethod
    def decode_message(*, raw_data: str | bytes) -> Dict[str, Any]:
        try:
            decoded = orjson.loads(raw_data)
        except orjson.JSONDecodeError as e:
            raise ValueError(f'Failed to decode message: {e}') from e
        if not isinstance(decoded, dict):
            raise ValueError('Failed to decode message: expected a JSON object')
        return decoded
