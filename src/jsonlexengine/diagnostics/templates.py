"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from jsonlexengine.constants import CONTEXT_SNIPPET_LENGTH

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _snippet(context: str) -> str:
    """Render remaining input for a message, escaped and truncated."""
    if len(context) > CONTEXT_SNIPPET_LENGTH:
        context = context[:CONTEXT_SNIPPET_LENGTH] + "..."
    return repr(context)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # RFC 8259 is the grammar the parser implements
    _DOCS_BASE = "https://www.rfc-editor.org/rfc/rfc8259"

    # =========================================================================
    # STRUCTURAL ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unexpected_end(span: SourceSpan | None = None) -> Diagnostic:
        """Input exhausted while a value or structure was incomplete.

        Args:
            span: Location of the end of input (optional)

        Returns:
            Diagnostic for UNEXPECTED_END
        """
        if span is None:
            msg = "Unexpected end of input"
        else:
            msg = f"Unexpected end of input at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END,
            message=msg,
            span=span,
            hint="Check for unclosed brackets, braces or string quotes",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2",
        )

    @staticmethod
    def unexpected_character(character: str, span: SourceSpan) -> Diagnostic:
        """Structurally invalid character.

        Args:
            character: The offending character
            span: Location of the character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {character!r} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint="Expected a value, a separator (',' or ':') or a closing bracket",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2",
        )

    # =========================================================================
    # LEXICAL ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def invalid_character(character: str, context: str, span: SourceSpan) -> Diagnostic:
        """Raw control or non-scalar character inside a string literal.

        Args:
            character: The offending character
            context: Remaining input starting at the character
            span: Location of the character

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        msg = (
            f"Invalid character U+{ord(character):04X} in string literal "
            f"at position {span.start} near {_snippet(context)}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            span=span,
            hint="Control characters must be escaped (e.g. \\n, \\t, \\u0001)",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def invalid_escape_character(
        character: str, context: str, span: SourceSpan
    ) -> Diagnostic:
        """Unrecognized character after a backslash.

        Args:
            character: The character following the backslash
            context: Remaining input starting at the character
            span: Location of the character

        Returns:
            Diagnostic for INVALID_ESCAPE_CHARACTER
        """
        msg = (
            f"Invalid escape character {character!r} at position {span.start} "
            f"near {_snippet(context)}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_ESCAPE_CHARACTER,
            message=msg,
            span=span,
            hint='Valid escapes are \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX',
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def invalid_hex(hex_text: str, context: str, span: SourceSpan) -> Diagnostic:
        """Unicode escape whose digits do not decode to a usable character.

        Args:
            hex_text: Up to four characters following \\u
            context: Remaining input starting at the first hex digit
            span: Location of the first hex digit

        Returns:
            Diagnostic for INVALID_HEX
        """
        msg = (
            f"Invalid unicode escape \\u{hex_text} at position {span.start} "
            f"near {_snippet(context)}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_HEX,
            message=msg,
            span=span,
            hint=(
                "Use exactly four hex digits; surrogate escapes (D800-DFFF) "
                "are not combined into astral characters"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def invalid_number(literal: str, context: str, span: SourceSpan) -> Diagnostic:
        """Numeric literal rejected by the grammar or unrepresentable.

        Args:
            literal: Input starting at the numeric literal
            context: Remaining input starting at the numeric literal
            span: Location of the literal

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        msg = f"Invalid number at position {span.start} near {_snippet(context)}"
        if literal != context:
            msg = f"Invalid number {_snippet(literal)} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            span=span,
            hint=(
                "Numbers are -?digits(.digits)?([eE][+-]?digits)? "
                "without leading zeros"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    # =========================================================================
    # LIMIT ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Array/object nesting deeper than the configured limit.

        Args:
            max_depth: The maximum allowed nesting depth
            span: Location of the opening bracket that exceeded the limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Flatten the document or raise max_nesting_depth on JsonParser",
        )

    @staticmethod
    def traversal_depth_exceeded(max_depth: int) -> Diagnostic:
        """Value tree deeper than a visitor's depth limit.

        Args:
            max_depth: The maximum allowed traversal depth

        Returns:
            Diagnostic for TRAVERSAL_DEPTH_EXCEEDED
        """
        msg = f"Maximum traversal depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.TRAVERSAL_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Value trees built by hand can exceed the parser's nesting limit",
        )
