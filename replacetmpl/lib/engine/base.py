"""
Engine entry point.

Validates the configuration, builds the replacement table, selects the token
pattern and binds the match handler. The result is a reusable transform that
maps a file's text and relative path to the substituted text.

Example:
    transform = transform_create({"title": "Boaty"})
    transform("<title>@package.title@</title>", "index.html.tmpl")
    # -> "<title>Boaty</title>"
"""

import re
from collections.abc import Sequence
from typing import Self
from rich.console import Console
from replacetmpl.lib.engine.diagnostics import DiagnosticReporter, DiagnosticSink
from replacetmpl.lib.engine.handlers import MatchHandler, handler_create
from replacetmpl.lib.engine.pattern import pattern_select, prefix_validate
from replacetmpl.lib.engine.table import (
    ReplacementSource,
    ReplacementTable,
    replacements_merge,
)
from replacetmpl.lib.errors import MissingReplacements
from replacetmpl.lib.log import LOG
from replacetmpl.models.dataModel import EngineOptions, ModeSelection


class TemplateTransform:
    """Substitute tokens in file contents.

    Holds only read-only state, so one instance can serve any number of
    files.

    Attributes:
        mode: Active mode selection
        replacements: Merged replacement table
        handler: Match handler bound to the table
    """

    def __init__(
        self: Self,
        mode: ModeSelection,
        replacements: ReplacementTable,
        handler: MatchHandler,
    ) -> None:
        self.mode: ModeSelection = mode
        self.replacements: ReplacementTable = replacements
        self.handler: MatchHandler = handler

    @property
    def prefix(self: Self) -> str | None:
        return self.mode.prefix

    def __call__(self: Self, text: str, path: str) -> str:
        """Replace every token in `text`.

        Args:
            text: Entire file contents
            path: Relative file path, used in diagnostics only

        Returns:
            Text with tokens replaced; problematic tokens are removed
        """

        def match_substitute(match: re.Match) -> str:
            return self.handler.handle(match.group(0), match.start(), text, path).text

        return self.mode.pattern.sub(match_substitute, text)


def debug_print(
    mode: ModeSelection, replacements: ReplacementTable, console: Console
) -> None:
    console.print("Prefix:", mode.prefix or "unprefixed")
    console.print("Replacements:", dict(replacements))


def transform_create(
    replacements: ReplacementSource | Sequence[ReplacementSource] | None,
    options: EngineOptions | None = None,
    sink: DiagnosticSink | None = None,
    console: Console | None = None,
    context_characters: int | None = None,
) -> TemplateTransform:
    """Configure the engine and return the transform.

    Args:
        replacements: One mapping, or a sequence of mappings where the
            first-listed wins on key collisions
        options: Engine configuration; defaults to prefix "package"
        sink: Receiver of diagnostics; defaults to warnings on stderr
        console: Console for debug output; defaults to stdout
        context_characters: Context window size for diagnostics

    Returns:
        TemplateTransform bound to the pattern and handler

    Raises:
        MissingReplacements: If no replacements were given
        InvalidPrefix: If the configured prefix is invalid
    """
    options = options or EngineOptions()
    if replacements is None:
        raise MissingReplacements()
    prefix_validate(options.prefix)

    table: ReplacementTable = replacements_merge(replacements)
    mode: ModeSelection = pattern_select(options)
    reporter: DiagnosticReporter = (
        DiagnosticReporter(sink)
        if context_characters is None
        else DiagnosticReporter(sink, context_characters)
    )
    handler: MatchHandler = handler_create(mode, table, reporter)
    LOG(
        f"Engine ready: prefix={mode.prefix or 'unprefixed'}, "
        f"{len(table)} replacement(s)"
    )

    if options.debug:
        debug_print(mode, table, console or Console())

    return TemplateTransform(mode, table, handler)
