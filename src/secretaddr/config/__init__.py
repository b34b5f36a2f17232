"""Configuration helpers for secret providers."""

from .helper import (
    SUPPORTED_TYPES,
    enum_value_of_ignore_case,
    get_property,
    get_secret_as_string,
    remove_prefix,
)

__all__ = [
    "SUPPORTED_TYPES",
    "enum_value_of_ignore_case",
    "get_property",
    "get_secret_as_string",
    "remove_prefix",
]
