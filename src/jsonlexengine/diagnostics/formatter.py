"""Diagnostic rendering for parse failures.

RUST output quotes the offending line of the parsed text, when it is
supplied, with carets under the span:

    error[UNEXPECTED_CHARACTER]: Unexpected character '}' at position 8
      --> line 1, column 9
        |
      1 | {"key": }
        |         ^
      = help: Expected a value, a separator (',' or ':') or a closing bracket
      = note: see https://www.rfc-editor.org/rfc/rfc8259#section-2

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from jsonlexengine.constants import EXCERPT_WIDTH

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters print as one blank so carets stay aligned
_BLANK_CONTROLS: dict[int, str] = {code: " " for code in range(0x20)}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Multi-line, with source excerpt (default)
    SIMPLE = "simple"  # Single line
    JSON = "json"  # One JSON object for tooling


def _excerpt(source: str, span: SourceSpan) -> tuple[str, int, int]:
    """Line of source holding span.start, cut to EXCERPT_WIDTH around it.

    Returns:
        (text, caret offset within text, caret count)
    """
    line_start = source.rfind("\n", 0, span.start) + 1
    line_end = source.find("\n", span.start)
    if line_end == -1:
        line_end = len(source)
    line = source[line_start:line_end]
    offset = span.start - line_start

    left = 0
    prefix = suffix = ""
    if len(line) > EXCERPT_WIDTH:
        left = max(0, min(offset - EXCERPT_WIDTH // 2, len(line) - EXCERPT_WIDTH))
        if left > 0:
            prefix = "..."
        if left + EXCERPT_WIDTH < len(line):
            suffix = "..."
        line = line[left : left + EXCERPT_WIDTH]

    text = prefix + line.translate(_BLANK_CONTROLS) + suffix
    caret = len(prefix) + offset - left
    width = max(1, min(span.end - span.start, len(line) - (offset - left)))
    return text, caret, width


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects for people or tools.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unexpected_end()))
        UNEXPECTED_END: Unexpected end of input
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format
            source: The parsed text; RUST output then quotes the failing line

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic, source: str | None) -> str:
        parts = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]
        span = diagnostic.span

        if span is not None:
            parts.append(f"  --> line {span.line}, column {span.column}")
            if source is not None:
                text, caret, width = _excerpt(source, span)
                blank = " " * len(str(span.line))
                parts.append(f"  {blank} |")
                parts.append(f"  {span.line} | {text}")
                parts.append(f"  {blank} | {' ' * caret}{'^' * width}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")
        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    @staticmethod
    def _format_json(diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }
        if diagnostic.span is not None:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return json.dumps(data, ensure_ascii=False)
