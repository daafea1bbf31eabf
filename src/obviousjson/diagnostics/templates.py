"""Error message templates.

Centralized error message templates for testable, consistent error messages.
The message strings are part of the public contract: callers match on them,
so they are kept lowercase and stable.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (RFC 8259, The JSON Data Interchange Format)
    _DOCS_BASE = "https://www.rfc-editor.org/rfc/rfc8259"

    # ------------------------------------------------------------------
    # Cursor and values
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of the source.

        Args:
            position: Offset at which the read was attempted

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
            hint="Check is_valid before reading the cursor head",
        )

    @staticmethod
    def value_unrecognized() -> Diagnostic:
        """No grammar rule matched at the start of the document."""
        return Diagnostic(
            code=DiagnosticCode.VALUE_UNRECOGNIZED,
            message="could not parse as value",
            hint="A JSON value starts with '\"', '-', a digit, '[', '{', "
            "or one of the literals true, false, null",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-3",
        )

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    @staticmethod
    def string_unterminated() -> Diagnostic:
        """String literal reached end of input without a closing quote."""
        return Diagnostic(
            code=DiagnosticCode.STRING_UNTERMINATED,
            message="unexpected end of string",
            hint="Add the closing '\"'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def unicode_escape_truncated() -> Diagnostic:
        """Fewer than four characters follow a \\u escape."""
        return Diagnostic(
            code=DiagnosticCode.STRING_UNICODE_ESCAPE_TRUNCATED,
            message="invalid unicode escape near end of string",
            hint="A \\u escape needs exactly four hex digits",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    @staticmethod
    def unicode_escape_invalid(subject: str) -> Diagnostic:
        """The four characters after \\u are not all hex digits.

        Args:
            subject: The offending four characters

        Returns:
            Diagnostic for STRING_UNICODE_ESCAPE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.STRING_UNICODE_ESCAPE_INVALID,
            message="invalid unicode escape",
            hint=f"'\\u{subject}' is not four hex digits",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-7",
        )

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    @staticmethod
    def fraction_digit_required() -> Diagnostic:
        """Decimal point not followed by a digit."""
        return Diagnostic(
            code=DiagnosticCode.NUMBER_FRACTION_DIGIT_REQUIRED,
            message="digit required after decimal point",
            hint="Write '1.0' instead of '1.'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-6",
        )

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    @staticmethod
    def array_unterminated() -> Diagnostic:
        """Array reached end of input without a closing bracket."""
        return Diagnostic(
            code=DiagnosticCode.ARRAY_UNTERMINATED,
            message="unexpected end of string in array",
            hint="Add the closing ']'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-5",
        )

    @staticmethod
    def array_missing_comma() -> Diagnostic:
        """Two array elements not separated by a comma."""
        return Diagnostic(
            code=DiagnosticCode.ARRAY_MISSING_COMMA,
            message="missing comma in array",
            hint="Separate array elements with ','",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-5",
        )

    @staticmethod
    def array_non_value() -> Diagnostic:
        """Something other than a value follows '[' or ','."""
        return Diagnostic(
            code=DiagnosticCode.ARRAY_NON_VALUE,
            message="non-value in array",
            hint="Remove the trailing comma or add a value after it",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-5",
        )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    @staticmethod
    def object_unterminated() -> Diagnostic:
        """Object reached end of input without a closing brace."""
        return Diagnostic(
            code=DiagnosticCode.OBJECT_UNTERMINATED,
            message="unexpected end of string in object",
            hint="Add the closing '}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    @staticmethod
    def object_missing_comma() -> Diagnostic:
        """Two members not separated by a comma."""
        return Diagnostic(
            code=DiagnosticCode.OBJECT_MISSING_COMMA,
            message="missing comma in object",
            hint="Separate object members with ','",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    @staticmethod
    def object_key_not_string() -> Diagnostic:
        """Member name is not a quoted string."""
        return Diagnostic(
            code=DiagnosticCode.OBJECT_KEY_NOT_STRING,
            message="key must be a string",
            hint="Quote member names with '\"'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    @staticmethod
    def object_missing_colon() -> Diagnostic:
        """Member name not followed by a colon."""
        return Diagnostic(
            code=DiagnosticCode.OBJECT_MISSING_COLON,
            message="expected colon in object",
            hint="Separate a member name from its value with ':'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    @staticmethod
    def object_non_value() -> Diagnostic:
        """Something other than a value follows ':'."""
        return Diagnostic(
            code=DiagnosticCode.OBJECT_NON_VALUE,
            message="unrecognized value in object",
            hint="Every member name needs a value after ':'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-4",
        )

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Arrays and objects nested deeper than the configured limit.

        Args:
            max_depth: The configured maximum nesting depth

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=f"maximum nesting depth of {max_depth} exceeded",
            hint="Flatten the document or raise max_nesting_depth",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-9",
        )

    @staticmethod
    def trailing_content(span: SourceSpan) -> Diagnostic:
        """Content remains after a complete value in strict mode.

        Args:
            span: Location of the unconsumed content

        Returns:
            Diagnostic for TRAILING_CONTENT
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_CONTENT,
            message=f"unexpected trailing content at position {span.start}",
            span=span,
            hint="A JSON text holds exactly one value",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2",
        )
