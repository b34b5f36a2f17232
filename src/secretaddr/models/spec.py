"""Secret specification models."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import List, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..addressing import (
    URL_SEPARATOR,
    Address,
    format_uri_and_key_and_params,
    parse_address,
)
from .field_kind import FieldKind

NAME_MIN_LENGTH = 3
NAME_EXTRA_CHARS = frozenset("_ .-")


class ResolutionType(str, Enum):
    """How often a secret is fetched from its provider."""

    ONCE = "ONCE"
    POLL = "POLL"
    TTL = "TTL"


class Resolution(BaseModel):
    """Secret resolution policy."""

    model_config = ConfigDict(frozen=True)

    type: ResolutionType = ResolutionType.ONCE
    duration: timedelta | None = None


class RetryOnError(BaseModel):
    """Retry policy when a provider fails to resolve a secret."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    delay: timedelta = timedelta(seconds=2)
    max_attempts: int = Field(default=3, ge=1)


class OnErrorStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    retry: RetryOnError | None = None


class PluginACL(BaseModel):
    """Plugin allowed to resolve the secret, optionally limited to some fields."""

    model_config = ConfigDict(frozen=True)

    id: str
    fields: List[str] | None = None


class ACLs(BaseModel):
    """Where in definitions a secret is allowed to be resolved."""

    model_config = ConfigDict(frozen=True)

    field_kind: FieldKind | None = None
    plugins: List[PluginACL] | None = None


class SecretSpec(BaseModel):
    """What can be configured to resolve a secret and manage its lifecycle.

    ``uri`` designates the secret to fetch, following the bare address
    syntax: /<provider id>/<secret location>. ``key`` is the key in the
    secret map, unless the key is computed at runtime (``is_el_key``).
    A spec either has an ``id`` or was generated from a reference
    (``is_generated``).
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    uri: str
    key: str | None = None
    is_el_key: bool = False
    is_generated: bool = False
    resolution: Resolution | None = None
    on_error_strategy: OnErrorStrategy | None = None
    acls: ACLs | None = None
    env_id: str
    publish_event_on_value_changed: bool = False
    renewable: bool = False

    @model_validator(mode="after")
    def check_consistency(self) -> "SecretSpec":
        """Validate id, key, env_id, uri and name."""

        if self.is_generated == _has_text(self.id):
            raise ValueError("spec is either generated or contains an id")
        if self.is_el_key == _has_text(self.key):
            raise ValueError("spec either uses EL key or specifies one")
        if not _has_text(self.env_id):
            raise ValueError("spec must contain an env_id")
        if not _has_text(self.uri):
            raise ValueError("spec must contain a uri")
        if not self.uri.startswith(URL_SEPARATOR):
            raise ValueError(f"uri must start with '{URL_SEPARATOR}'")
        if self.name is not None:
            _assert_name(self.name)
        return self

    def uri_and_key_and_params(self) -> str:
        return format_uri_and_key_and_params(
            self.uri, self.key, self.renewable, self.publish_event_on_value_changed
        )

    def to_secret_url(self) -> Address:
        """The spec as an Address, used to resolve the secret."""

        return parse_address(self.uri_and_key_and_params(), is_uri=True)

    def as_simple_string(self) -> str:
        """Name if set, uri otherwise."""

        return self.name if self.name else self.uri

    def allowed_field_kind(self) -> FieldKind | None:
        return self.acls.field_kind if self.acls is not None else None

    def allowed_fields(self) -> Set[str]:
        """Lower-cased fields allowed by all plugin ACLs."""

        if self.acls is None or self.acls.plugins is None:
            return set()
        return {
            field.lower()
            for plugin in self.acls.plugins
            for field in (plugin.fields or [])
        }

    def has_resolution_type(self, type_: ResolutionType) -> bool:
        """Check the resolution type, a missing resolution counts as ONCE."""

        if type_ == ResolutionType.ONCE:
            return self.resolution is None or self.resolution.type == ResolutionType.ONCE
        return self.resolution is not None and self.resolution.type == type_


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _assert_name(name: str) -> None:
    if len(name) < NAME_MIN_LENGTH:
        raise ValueError(f"spec name min length is {NAME_MIN_LENGTH}")
    if not (name[0].isalnum() and name[-1].isalnum()):
        raise ValueError("spec name must start and end with an alphanumeric char")
    if any(not (c.isalnum() or c in NAME_EXTRA_CHARS) for c in name):
        raise ValueError("spec name is not normalized")


__all__ = [
    "ACLs",
    "OnErrorStrategy",
    "PluginACL",
    "Resolution",
    "ResolutionType",
    "RetryOnError",
    "SecretSpec",
]
