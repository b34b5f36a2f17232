"""Secret value kinds."""

from enum import Enum


class FieldKind(str, Enum):
    """Nature of a secret value.

    For a provider it is what the secret holds; for a spec it restricts
    the definition fields the secret can be used in.
    """

    GENERIC = "GENERIC"
    PASSWORD = "PASSWORD"
    HEADER = "HEADER"
    PRIVATE_KEY = "PRIVATE_KEY"
    PUBLIC_KEY = "PUBLIC_KEY"
    KEYSTORE = "KEYSTORE"


__all__ = ["FieldKind"]
