from typing import Callable

from uuid_utils import uuid7


IdGenerator = Callable[[], str]


def new_uuid7() -> str:
    # Time-ordered ids keep DynamoDB items roughly sorted by creation
    return str(uuid7())
