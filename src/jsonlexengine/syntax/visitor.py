"""Visitor pattern for value tree traversal.

Enables tools to walk parsed JSON values without modifying the value classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_JsonArray (class name) rather than visit_json_array.
See: https://docs.python.org/3/library/ast.html#ast.NodeVisitor

Type Parameters:
- ValueVisitor[T] is generic over return type T
- ValueVisitor (no type param) defaults to T=JsonValue

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from jsonlexengine.constants import MAX_DEPTH
from jsonlexengine.core.depth_guard import DepthGuard

from .values import JsonArray, JsonObject, JsonValue

__all__ = ["ValueVisitor"]


class ValueVisitor[T = JsonValue]:
    """Base visitor for traversing JSON value trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses array items and object member values. Override
    visit_<ClassName> methods to add custom behavior.

    Uses class-level dispatch table:
    - Dispatch table built once per class definition via __init_subclass__
    - Bound methods cached per instance on first use

    Depth Protection:
        Only containers count towards the depth limit, so any tree the
        parser accepted with the same limit can be traversed. Hand-built
        trees nested deeper raise DepthLimitExceededError instead of
        RecursionError.

    Example:
        >>> class CountNumbers(ValueVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_JsonNumber(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> from jsonlexengine import parse
        >>> value, _ = parse('[1, [2.5, true], {"n": 3}]')
        >>> counter = CountNumbers()
        >>> _ = counter.visit(value)
        >>> counter.count
        3
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum container nesting to traverse
                      (default: MAX_DEPTH, the parser's own limit).
        """
        effective_max_depth = max_depth if max_depth is not None else MAX_DEPTH
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[JsonValue], T]] = {}

    @property
    def max_depth(self) -> int:
        """Effective traversal depth limit (after recursion-limit clamping)."""
        return self._depth_guard.max_depth

    def visit(self, node: JsonValue) -> T:
        """Visit a value (dispatcher with class-level + instance-level caching).

        Args:
            node: Value to visit

        Returns:
            Result of visiting the value
        """
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        method_name = self._class_visit_methods.get(node_type.__name__)
        method = getattr(self, method_name) if method_name else self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: JsonValue) -> T:
        """Default visitor: traverse children, return the node itself.

        Raises:
            DepthLimitExceededError: If container nesting exceeds max_depth
        """
        match node:
            case JsonArray(items=items):
                with self._depth_guard:
                    for item in items:
                        self.visit(item)
            case JsonObject():
                with self._depth_guard:
                    for member in node.members.values():
                        self.visit(member)
        return node  # type: ignore[return-value]  # T defaults to JsonValue

    def guarded(self) -> DepthGuard:
        """Depth guard for overrides that descend into a container themselves.

        Example:
            >>> def visit_JsonArray(self, node):
            ...     with self.guarded():
            ...         return [self.visit(item) for item in node.items]
        """
        return self._depth_guard
