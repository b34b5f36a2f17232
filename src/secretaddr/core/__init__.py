"""Secret values as handed over by providers."""

from .secret import Secret
from .secret_map import SecretMap, WellKnownSecretKey

__all__ = ["Secret", "SecretMap", "WellKnownSecretKey"]
