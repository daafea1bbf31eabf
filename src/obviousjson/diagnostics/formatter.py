"""Diagnostic formatting service.

Renders parse diagnostics for people (Rust compiler style, optionally with
an excerpt of the JSON source), for logs (single line) and for tools (JSON).
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_RED = "\033[1;31m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON object for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> span = SourceSpan(start=4, end=7, line=1, column=5)
        >>> diagnostic = ErrorTemplate.trailing_content(span)
        >>> print(formatter.format(diagnostic, source="[1] [2]"))
        error[TRAILING_CONTENT]: unexpected trailing content at position 4
          --> line 1, column 5
            |
          1 | [1] [2]
            |     ^^^
          = help: A JSON text holds exactly one value
          = note: see https://www.rfc-editor.org/rfc/rfc8259#section-2
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format
            source: JSON text the diagnostic refers to. Only the Rust style
                uses it, and only when the diagnostic has a span.

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
        severity = diagnostic.severity
        if self.color:
            shade = _RED if severity == "error" else _YELLOW
            severity = f"{shade}{severity}{_RESET}"

        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.span:
            parts.append(
                f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}"
            )
            if source is not None:
                parts.extend(_excerpt(source, diagnostic.span))

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)


def _excerpt(source: str, span: SourceSpan) -> list[str]:
    """Source line of span.start with carets under the spanned characters.

    Carets stop at the end of the line; an empty span gets a single caret.
    """
    line_start = span.start - (span.column - 1)
    line_end = source.find("\n", span.start)
    if line_end < 0:
        line_end = len(source)
    text = source[line_start:line_end].rstrip("\r")

    width = max(min(span.end, line_start + len(text)) - span.start, 1)
    gutter = " " * len(str(span.line))
    return [
        f"  {gutter} |",
        f"  {span.line} | {text}",
        f"  {gutter} | {' ' * (span.column - 1)}{'^' * width}",
    ]
