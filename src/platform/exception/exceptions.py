class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed value object or aggregate input. Never retried."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidStateError(DomainError):
    """Transition attempted from a status that does not allow it."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class PersistenceError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class PublishError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
