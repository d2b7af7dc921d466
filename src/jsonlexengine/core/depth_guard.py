"""Nesting limits shared by the parser and value tree traversal.

The parser recurses once per array or object level, and so does every
ValueVisitor. Both bound that recursion below the interpreter's own
limit: the parser through depth_clamp(), visitors through DepthGuard.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from jsonlexengine.constants import MAX_DEPTH
from jsonlexengine.diagnostics import JsonError
from jsonlexengine.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(JsonError):
    """A value tree is nested deeper than the visitor walking it allows.

    Trees from the parser stay within MAX_DEPTH, so this points at a tree
    built by hand or a visitor given a smaller max_depth.
    """


@dataclass(slots=True)
class DepthGuard:
    """Counts container levels entered by a traversal.

    Each ``with guard:`` block is one level. Entering a level beyond
    max_depth raises before the count changes, so a failed entry leaves
    current_depth as it was.

    Attributes:
        max_depth: Deepest level allowed, clamped by depth_clamp()
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.traversal_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1


def depth_clamp(
    requested_depth: int, reserve_frames: int = 50, frames_per_level: int = 1
) -> int:
    """Largest usable nesting depth not above requested_depth.

    A depth is usable when ``depth * frames_per_level + reserve_frames``
    fits in sys.getrecursionlimit(). Lowering the request logs a warning.

    Args:
        requested_depth: Depth asked for by the caller
        reserve_frames: Frames kept free for the caller's own stack
        frames_per_level: Frames one nesting level costs. The parser
            spends two (parse_value and parse_array or parse_object).

    Returns:
        requested_depth, or the usable maximum when that is lower

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        150
        >>> depth_clamp(100, frames_per_level=2)
        75
    """
    recursion_limit = sys.getrecursionlimit()
    usable = (recursion_limit - reserve_frames) // frames_per_level
    if requested_depth <= usable:
        return requested_depth
    logger.warning(
        "Clamping nesting depth %d to %d (recursion limit %d, %d frames per level)",
        requested_depth,
        usable,
        recursion_limit,
        frames_per_level,
    )
    return usable
