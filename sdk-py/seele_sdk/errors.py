from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class SeeleError(Exception):
    """Base class for every error raised by the SDK."""


class TransportError(SeeleError):
    """The default transport could not complete a JSON-RPC call."""

    def __init__(self, method: str, reason: str, code: Optional[int] = None):
        super().__init__(f"{method}: {reason}")
        self.method = method
        self.reason = reason
        self.code = code


@dataclass(eq=False)
class DecodeError(SeeleError):
    """A wire result could not be turned into a typed record.

    ``path`` locates the offending field inside the result, e.g.
    ``transactions[0].amount``. An empty path means the result itself.
    """

    method: str
    path: str

    def _where(self) -> str:
        return f"{self.method}:{self.path or '<result>'}"

    def __str__(self) -> str:
        return f"{type(self).__name__}:{self._where()}"


@dataclass(eq=False)
class FieldMissing(DecodeError):
    def __str__(self) -> str:
        return f"field missing:{self._where()}"


@dataclass(eq=False)
class FieldTypeMismatch(DecodeError):
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"field type mismatch:{self._where()}:expected {self.expected}, got {self.actual}"


@dataclass(eq=False)
class NumericFormat(DecodeError):
    value: Any
    reason: str

    def __str__(self) -> str:
        return f"numeric format:{self._where()}:{self.reason}:{self.value!r}"


@dataclass(eq=False)
class ConsistencyError(SeeleError):
    """Two values that must agree do not, e.g. an echoed account address."""

    method: str
    field: str
    expected: Any
    actual: Any

    def __str__(self) -> str:
        return f"inconsistent {self.field} from {self.method}: expected {self.expected!r}, got {self.actual!r}"
