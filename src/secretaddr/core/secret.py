"""Secret value wrapper."""

import base64
from typing import Union

SecretData = Union[str, bytes]


class Secret:
    """A secret value as returned by a provider.

    Holds either text or raw bytes. When ``base64_encoded`` is set the
    value is decoded on access, so providers can hand over what the
    backend returned without decoding it first.
    """

    __slots__ = ("_data", "_base64_encoded")

    def __init__(self, data: SecretData, base64_encoded: bool = False):
        if not isinstance(data, (str, bytes)):
            raise ValueError(
                f"secret data must be str or bytes, not {type(data).__name__}"
            )
        self._data = data
        self._base64_encoded = base64_encoded

    def as_bytes(self) -> bytes:
        raw = self._data.encode("utf-8") if isinstance(self._data, str) else self._data
        if self._base64_encoded:
            return base64.b64decode(raw)
        return raw

    def as_string(self) -> str:
        if isinstance(self._data, str) and not self._base64_encoded:
            return self._data
        return self.as_bytes().decode("utf-8")

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return (
            type(self._data) is type(other._data)
            and self._data == other._data
            and self._base64_encoded == other._base64_encoded
        )

    def __hash__(self) -> int:
        return hash((type(self._data).__name__, self._data, self._base64_encoded))

    def __repr__(self) -> str:
        return f"Secret(<{type(self._data).__name__}>, base64_encoded={self._base64_encoded})"


__all__ = ["Secret", "SecretData"]
