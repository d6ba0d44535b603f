"""
Diagnostics for problematic tokens.

Computes where a token sits in its file (1-based line number) and a bounded
window of surrounding text, then hands the resulting `Diagnostic` to a sink.

Two sinks are provided:
- ConsoleSink: prints a human-readable warning to stderr, token in red
- CollectingSink: keeps diagnostics as data, e.g. for tests or summaries

Example output of the console sink:

    @version@ replacement must start with 'package.'
    Found at line 3 in docs/index.html.tmpl
    ...<p>Release notes for @version@</p>
"""

from typing import Final, Protocol, Self, runtime_checkable
from rich.console import Console
from rich.text import Text
from replacetmpl.config.settings import CONTEXT_CHARACTERS
from replacetmpl.models.dataModel import Diagnostic

ELLIPSIS: Final[str] = "..."
TOKEN_STYLE: Final[str] = "red"


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for receivers of token diagnostics."""

    def problem_report(self: Self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic. Must not raise."""
        ...


def line_compute(text: str, offset: int) -> int:
    """Return the 1-based line on which `offset` lies in `text`."""
    return text.count("\n", 0, offset) + 1


def diagnostic_build(
    match: str,
    offset: int,
    text: str,
    path: str,
    message: str,
    context_characters: int = CONTEXT_CHARACTERS,
) -> Diagnostic:
    """Compute the diagnostic for a token.

    The context window holds up to `context_characters` characters on each
    side of the token, clamped to the text. A leading ellipsis marks that the
    window start was clamped away from the text start. A trailing ellipsis is
    set whenever the window end coincides with the end of the text.

    Args:
        match: The offending token text
        offset: Index of the token start in `text`
        text: Entire file contents
        path: Relative file path
        message: Problem description

    Returns:
        Diagnostic describing the token and its surroundings
    """
    start_index: int = max(0, offset - context_characters)
    match_end: int = offset + len(match)
    end_index: int = min(len(text), match_end + context_characters)

    return Diagnostic(
        match=match,
        offset=offset,
        line=line_compute(text, offset),
        path=path,
        message=message,
        before=text[start_index:offset],
        after=text[match_end:end_index],
        leading_ellipsis=start_index > 0,
        trailing_ellipsis=end_index == len(text),
    )


def ellipsis(display: bool) -> str:
    return ELLIPSIS if display else ""


class ConsoleSink:
    """Print diagnostics as warnings on a rich console.

    Attributes:
        console: Target console, stderr by default
    """

    def __init__(self: Self, console: Console | None = None) -> None:
        self.console: Console = console or Console(stderr=True)

    def problem_report(self: Self, diagnostic: Diagnostic) -> None:
        """Print the token, its problem, its location and its context."""
        self.console.print()
        self.console.print(
            Text.assemble((diagnostic.match, TOKEN_STYLE), f" {diagnostic.message}"),
            soft_wrap=True,
        )
        self.console.print(
            Text(f"Found at line {diagnostic.line} in {diagnostic.path}"),
            soft_wrap=True,
        )
        self.console.print(
            Text.assemble(
                ellipsis(diagnostic.leading_ellipsis),
                diagnostic.before,
                (diagnostic.match, TOKEN_STYLE),
                diagnostic.after,
                ellipsis(diagnostic.trailing_ellipsis),
            ),
            soft_wrap=True,
        )


class CollectingSink:
    """Keep diagnostics in memory.

    Attributes:
        diagnostics: Every diagnostic received, in report order
    """

    def __init__(self: Self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def problem_report(self: Self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def clear(self: Self) -> None:
        self.diagnostics.clear()


class DiagnosticReporter:
    """Build diagnostics and forward them to a sink.

    Attributes:
        sink: Receiver of the diagnostics
        context_characters: Context window size on each side of a token
    """

    def __init__(
        self: Self,
        sink: DiagnosticSink | None = None,
        context_characters: int = CONTEXT_CHARACTERS,
    ) -> None:
        self.sink: DiagnosticSink = sink if sink is not None else ConsoleSink()
        self.context_characters: int = context_characters

    def report(
        self: Self, match: str, offset: int, text: str, path: str, message: str
    ) -> Diagnostic:
        """Build the diagnostic for a token and report it.

        Returns:
            The reported diagnostic
        """
        diagnostic: Diagnostic = diagnostic_build(
            match, offset, text, path, message, self.context_characters
        )
        self.sink.problem_report(diagnostic)
        return diagnostic
