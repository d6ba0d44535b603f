"""
Match handlers.

A handler decides what a single token becomes: the value from the replacement
table, or nothing. Missing keys and missing prefixes are reported through the
diagnostic reporter and the token is removed from the output. Handlers never
raise for bad tokens, so one pass over a file surfaces every problem.
"""

from typing import Final, Self
from replacetmpl.lib.engine.diagnostics import DiagnosticReporter
from replacetmpl.lib.engine.pattern import token_parse
from replacetmpl.lib.engine.table import ReplacementTable
from replacetmpl.models.dataModel import (
    HandlerKind,
    MatchOutcome,
    ModeSelection,
    ParsedToken,
    TokenKind,
)

NO_REPLACEMENT: Final[str] = "has no replacement!"


class MatchHandler:
    """Base match handler, resolving well-formed tokens through the table.

    Attributes:
        mode: Active mode selection
        replacements: Merged replacement table
        reporter: Diagnostic reporter for problematic tokens
    """

    def __init__(
        self: Self,
        mode: ModeSelection,
        replacements: ReplacementTable,
        reporter: DiagnosticReporter,
    ) -> None:
        self.mode: ModeSelection = mode
        self.replacements: ReplacementTable = replacements
        self.reporter: DiagnosticReporter = reporter

    def handle(
        self: Self, match: str, offset: int, text: str, path: str
    ) -> MatchOutcome:
        """Resolve a token to its substitution.

        Args:
            match: Complete token text
            offset: Index of the token start in `text`
            text: Entire file contents
            path: Relative file path, for diagnostics

        Returns:
            MatchOutcome with the replacement (empty if the token was
            reported) and the diagnostic, if any
        """
        token: ParsedToken = token_parse(self.mode, match)

        if token.kind is TokenKind.NOMATCH:
            return MatchOutcome(text=match)

        if token.kind is TokenKind.MISSING_PREFIX:
            return self.problem_report(
                match, offset, text, path, self.missingPrefix_message()
            )

        if token.key not in self.replacements:
            return self.problem_report(match, offset, text, path, NO_REPLACEMENT)

        try:
            return MatchOutcome(text=str(self.replacements[token.key]))
        except Exception as e:
            message: str = f"replacement cannot be rendered as text ({e})"
            return self.problem_report(match, offset, text, path, message)

    def missingPrefix_message(self: Self) -> str:
        return NO_REPLACEMENT

    def problem_report(
        self: Self, match: str, offset: int, text: str, path: str, message: str
    ) -> MatchOutcome:
        """Report a token and remove it from the output."""
        return MatchOutcome(
            text="", diagnostic=self.reporter.report(match, offset, text, path, message)
        )


class PrefixedMatchHandler(MatchHandler):
    """Handle `@<prefix>.key@` tokens, diagnosing tokens without the prefix."""

    def missingPrefix_message(self: Self) -> str:
        return f"replacement must start with '{self.mode.prefix}.'"


class UnprefixedMatchHandler(MatchHandler):
    """Handle `@key@` tokens."""


def handler_create(
    mode: ModeSelection, replacements: ReplacementTable, reporter: DiagnosticReporter
) -> MatchHandler:
    """Bind the handler variant the mode calls for."""
    if mode.handler_kind is HandlerKind.UNPREFIXED:
        return UnprefixedMatchHandler(mode, replacements, reporter)
    return PrefixedMatchHandler(mode, replacements, reporter)
