"""Pydantic models for secret specifications."""

from .field_kind import FieldKind
from .spec import (
    ACLs,
    OnErrorStrategy,
    PluginACL,
    Resolution,
    ResolutionType,
    RetryOnError,
    SecretSpec,
)

__all__ = [
    "ACLs",
    "FieldKind",
    "OnErrorStrategy",
    "PluginACL",
    "Resolution",
    "ResolutionType",
    "RetryOnError",
    "SecretSpec",
]
