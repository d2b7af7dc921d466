"""JSON value tree node definitions.

One frozen dataclass per JSON type forms a closed tagged union. A tree is
built once by a single parse pass, owns all nested values, and is never
mutated afterwards.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, TypeIs

from jsonlexengine.enums import ValueKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "JsonString",
    "JsonNumber",
    "JsonBool",
    "JsonNull",
    # Containers
    "JsonArray",
    "JsonObject",
    # Type aliases
    "JsonValue",
]


# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonString:
    """String value with all escapes decoded."""

    kind: ClassVar[ValueKind] = ValueKind.STRING

    value: str


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """Number value in exact-integer or approximate-float form.

    A parsed number carries exactly one of ``exact`` / ``approximate``. The
    ``literal`` keeps the source text of the number (sign, integer digits,
    fraction, exponent) whichever interpretation was chosen, so display and
    re-parsing never depend on float formatting.

    Attributes:
        exact: Mathematically exact integer value, if the literal denotes one
        approximate: Nearest float, for literals that are not integers
        literal: Source literal text

    Example:
        >>> JsonNumber(exact=1000, literal="1e3").is_exact
        True
        >>> JsonNumber(approximate=0.5, literal="5e-1").value
        0.5
    """

    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    exact: int | None = None
    approximate: float | None = None
    literal: str | None = None

    def __post_init__(self) -> None:
        """Validate that at most one numeric interpretation is present."""
        if self.exact is not None and self.approximate is not None:
            msg = "JsonNumber cannot carry both exact and approximate values"
            raise ValueError(msg)

    @property
    def is_exact(self) -> bool:
        """True when the number decoded without rounding."""
        return self.exact is not None

    @property
    def value(self) -> int | float | None:
        """The exact integer if present, otherwise the approximate float."""
        return self.exact if self.exact is not None else self.approximate

    @staticmethod
    def guard(value: object) -> TypeIs["JsonNumber"]:
        """Type guard for JsonNumber."""
        return isinstance(value, JsonNumber)


@dataclass(frozen=True, slots=True)
class JsonBool:
    """Boolean value (``true`` / ``false``)."""

    kind: ClassVar[ValueKind] = ValueKind.BOOL

    value: bool


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The ``null`` value."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Ordered sequence of values. The empty array is a distinct value."""

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    items: tuple["JsonValue", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]

    @staticmethod
    def guard(value: object) -> TypeIs["JsonArray"]:
        """Type guard for JsonArray."""
        return isinstance(value, JsonArray)


@dataclass(frozen=True, slots=True)
class JsonObject:
    """Mapping from unique string keys to values.

    Members are exposed through a read-only mapping proxy. When a document
    repeats a key, the parser keeps the key's first-seen slot and stores the
    value of its last occurrence.

    Equality compares key/value pairs only, not member order.

    Example:
        >>> obj = JsonObject({"a": JsonNull()})
        >>> obj["a"]
        JsonNull()
        >>> obj.members["b"] = JsonNull()
        Traceback (most recent call last):
        ...
        TypeError: 'mappingproxy' object does not support item assignment
    """

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    members: Mapping[str, "JsonValue"]

    def __post_init__(self) -> None:
        """Freeze members behind a private copy."""
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return dict(self.members) == dict(other.members)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> "JsonValue":
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __repr__(self) -> str:
        return f"JsonObject(members={dict(self.members)!r})"

    @staticmethod
    def guard(value: object) -> TypeIs["JsonObject"]:
        """Type guard for JsonObject."""
        return isinstance(value, JsonObject)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type JsonValue = JsonString | JsonNumber | JsonBool | JsonNull | JsonArray | JsonObject
