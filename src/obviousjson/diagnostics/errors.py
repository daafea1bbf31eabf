"""obviousjson exception hierarchy with structured diagnostics.

Grammar rules never raise: they return invalid outcomes. These exceptions
exist for the Python-facing surface (parse, parsev), which translates
outcomes into raised errors. All exceptions keep the originating
Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JSONError(Exception):
    """Base exception for all obviousjson errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        source: JSON text being parsed when the error was raised (optional)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        diagnostic: Diagnostic | None = None,
        *,
        source: str | None = None,
    ) -> None:
        """Initialize JSONError.

        Args:
            message: Error message string OR Diagnostic object
            diagnostic: Diagnostic to attach when message is a plain string
            source: JSON text the error refers to, for excerpts in format_error()
        """
        self.source = source
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error(source))
        else:
            self.diagnostic = diagnostic
            super().__init__(message)

    def format_error(self) -> str:
        """Render the error in Rust compiler style.

        Includes the offending source line when the diagnostic has a span
        and the source is known. Falls back to the plain message when there
        is no diagnostic.

        Example:
            >>> try:
            ...     parse("[1] [2]", strict=True)
            ... except JSONSyntaxError as error:
            ...     print(error.format_error().splitlines()[0])
            error[TRAILING_CONTENT]: unexpected trailing content at position 4
        """
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error(self.source)


class JSONSyntaxError(JSONError):
    """A grammar rule recognized its construct but the input is malformed.

    The message is "invalid: " followed by the rule's fixed diagnostic
    message, e.g. "invalid: missing comma in array".
    """


class JSONUnrecognizedError(JSONError):
    """No grammar rule matched at the start of the document.

    Raised for inputs such as a bare identifier ("abc") or an empty string.
    """
