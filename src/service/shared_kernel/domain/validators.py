"""Shared domain validation utilities (attrs validators / converters)."""

from enum import Enum
from typing import Any, Callable, Type, TypeVar

from src.platform.exception.exceptions import ValidationError


_E = TypeVar('_E', bound=Enum)


class StringValidators:
    @staticmethod
    def validate_required_string(value: Any, field_name: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f'{field_name} is required')

    @staticmethod
    def required(_instance: Any, attribute: Any, value: Any) -> None:
        """attrs validator form of ``validate_required_string``"""
        StringValidators.validate_required_string(value, attribute.name)


def enum_converter(enum_cls: Type[_E]) -> Callable[[Any], _E]:
    def convert(value: Any) -> _E:
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ', '.join(str(member.value) for member in enum_cls)
            raise ValidationError(
                f'Invalid {enum_cls.__name__} "{value}", expected one of: {allowed}'
            ) from None

    return convert
