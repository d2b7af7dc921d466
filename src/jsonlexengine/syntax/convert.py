"""Conversion of value trees to plain Python objects.

Mapping:
    JsonString -> str
    JsonNumber -> int (exact) or float (approximate)
    JsonBool   -> bool
    JsonNull   -> None
    JsonArray  -> list
    JsonObject -> dict (member order preserved)

Python 3.13+.
"""

from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .visitor import ValueVisitor

__all__ = ["PythonConverter", "to_python"]

type PythonValue = (
    str | int | float | bool | None | list[PythonValue] | dict[str, PythonValue]
)


class PythonConverter(ValueVisitor[PythonValue]):
    """Visitor producing plain Python data from a value tree."""

    __slots__ = ()

    def visit_JsonString(self, node: JsonString) -> PythonValue:
        return node.value

    def visit_JsonNumber(self, node: JsonNumber) -> PythonValue:
        if node.exact is not None:
            return node.exact
        return node.approximate

    def visit_JsonBool(self, node: JsonBool) -> PythonValue:
        return node.value

    def visit_JsonNull(self, node: JsonNull) -> PythonValue:  # noqa: ARG002
        return None

    def visit_JsonArray(self, node: JsonArray) -> PythonValue:
        with self.guarded():
            return [self.visit(item) for item in node.items]

    def visit_JsonObject(self, node: JsonObject) -> PythonValue:
        with self.guarded():
            return {key: self.visit(member) for key, member in node.members.items()}


def to_python(value: JsonValue, *, max_depth: int | None = None) -> PythonValue:
    """Convert a value tree to str/int/float/bool/None/list/dict.

    Args:
        value: Parsed (or hand-built) value tree
        max_depth: Maximum container nesting (default: MAX_DEPTH)

    Returns:
        Plain Python data

    Raises:
        DepthLimitExceededError: If the tree is nested deeper than max_depth

    Example:
        >>> from jsonlexengine import parse
        >>> tree, _ = parse('{"a": [1, 2.5, null]}')
        >>> to_python(tree)
        {'a': [1, 2.5, None]}
    """
    return PythonConverter(max_depth=max_depth).visit(value)
