"""Helpers to read typed values out of flat configuration properties.

Provider configurations arrive as flat dicts, e.g.
``{"auth.method": "token", "auth.token": Secret(...), "port": "8200"}``.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.secret import Secret

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

SUPPORTED_TYPES = (str, int, float, bool)

_MISSING = object()


def remove_prefix(properties: Mapping[str, Any], prefix: str) -> Dict[str, Any]:
    """Keep properties under ``prefix.`` with the prefix removed.

    Examples:
        >>> remove_prefix({"auth.method": "token", "port": 8200}, "auth")
        {'method': 'token'}
    """
    start = f"{prefix}."
    return {
        key[len(start):]: value
        for key, value in properties.items()
        if key.startswith(start)
    }


def enum_value_of_ignore_case(
    value: str, enum_cls: Type[E], field: Optional[str]
) -> E:
    """Look up an enum member by name, ignoring case.

    Args:
        value: Member name in any case
        enum_cls: Enum to search
        field: Property name, used in the error message

    Raises:
        ValueError: If no member matches
    """
    for member in enum_cls:
        if member.name.casefold() == value.casefold():
            return member
    allowed = ", ".join(m.name for m in enum_cls)
    raise ValueError(
        f"Invalid value '{value}' for '{field}', expected one of: {allowed}"
    )


def get_property(
    properties: Optional[Mapping[str, Any]],
    key: str,
    type_: Type[T],
    default: Any = _MISSING,
) -> T:
    """Read a property, converting strings to the requested type.

    Args:
        properties: Configuration properties
        key: Property name
        type_: One of str, int, float, bool
        default: Returned when the property is missing

    Raises:
        TypeError: If properties is None
        KeyError: If the property is missing and no default is given
        ValueError: If the type is unsupported or the value does not convert
    """
    if properties is None:
        raise TypeError("properties cannot be None")
    if type_ not in SUPPORTED_TYPES:
        raise ValueError(
            f"Unsupported property type {type_.__module__}.{type_.__qualname__}"
        )

    value = properties.get(key)
    if value is None:
        if default is _MISSING:
            raise KeyError(f"property '{key}' is missing and has no default")
        return default

    if type_ is str:
        return str(value)
    try:
        return TypeAdapter(type_).validate_python(value)
    except ValidationError as e:
        raise ValueError(
            f"property '{key}' cannot be converted to {type_.__name__}: {value!r}"
        ) from e


def get_secret_as_string(
    properties: Mapping[str, Any], key: str, default: Optional[str] = None
) -> Optional[str]:
    """Read a property that may hold a plain string or a Secret."""
    value = properties.get(key)
    if value is None:
        return default
    if isinstance(value, Secret):
        return value.as_string()
    return str(value)


__all__ = [
    "SUPPORTED_TYPES",
    "enum_value_of_ignore_case",
    "get_property",
    "get_secret_as_string",
    "remove_prefix",
]
