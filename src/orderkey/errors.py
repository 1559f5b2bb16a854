"""Hard failures raised while decoding or comparing order codes.

Recoverable conditions (malformed field content, truncated codes under
default filling) never raise; they surface through the defaulted flags on the
decode result instead.
"""

from __future__ import annotations

from collections.abc import Sequence


class OrderKeyError(ValueError):
    """Base class for every error surfaced to callers."""


class MissingInputError(OrderKeyError):
    def __init__(self, message: str = "Code ist erforderlich") -> None:
        super().__init__(message)


class UnknownFamilyError(OrderKeyError):
    def __init__(self, code: str, supported: Sequence[str]) -> None:
        self.code = code
        self.supported = tuple(supported)
        super().__init__(f"Unbekannter Produkttyp. Unterstützt: {', '.join(self.supported)}")


class WrongFamilyError(OrderKeyError):
    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"Code muss mit '{expected}' beginnen")


class IncompleteCodeError(OrderKeyError):
    def __init__(self, field_name: str, position: int) -> None:
        self.field_name = field_name
        self.position = position
        super().__init__(f"Unvollständiger Code: '{field_name}' fehlt ab Position {position}")


class ConfigError(OrderKeyError):
    """Invalid decoder configuration values or file."""
