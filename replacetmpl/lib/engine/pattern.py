"""
Token pattern selection.

Resolves the engine mode from its options and builds the matching pattern:

- default:   @package.key@   prefix "package"
- prefixed:  @<prefix>.key@  configured prefix
- unprefixed: @key@          no prefix concept

In the prefixed modes the prefix group is optional, so tokens lacking the
prefix still match and can be diagnosed instead of passing through.
"""

import re
from typing import Final
from replacetmpl.config.settings import DEFAULT_PREFIX, TOKEN_CHARACTERS
from replacetmpl.lib.errors import InvalidPrefix
from replacetmpl.models.dataModel import (
    EngineOptions,
    HandlerKind,
    ModeSelection,
    ParsedToken,
    TokenKind,
)

NAME_PATTERN: Final[re.Pattern] = re.compile(f"{TOKEN_CHARACTERS}+")
UNPREFIXED_PATTERN: Final[re.Pattern] = re.compile(f"@({TOKEN_CHARACTERS}+)@")


def prefixedPattern_build(prefix: str) -> re.Pattern:
    """Build the token pattern for a validated prefix."""
    return re.compile(f"@({re.escape(prefix)}\\.)?({TOKEN_CHARACTERS}+)@")


DEFAULT_PATTERN: Final[re.Pattern] = prefixedPattern_build(DEFAULT_PREFIX)


def prefix_validate(prefix: str | None) -> None:
    """Check that a configured prefix only uses [a-zA-Z0-9].

    An unset or empty prefix is valid and selects the default.

    Raises:
        InvalidPrefix: If the prefix contains any other character
    """
    if prefix and not NAME_PATTERN.fullmatch(prefix):
        raise InvalidPrefix(prefix)


def pattern_select(options: EngineOptions) -> ModeSelection:
    """Resolve the mode, pattern and handler kind for the given options.

    `unprefixed` overrides any prefix. Without either, the default prefix
    applies.

    Args:
        options: Engine configuration

    Returns:
        ModeSelection with compiled pattern, active prefix and handler kind

    Raises:
        InvalidPrefix: If the configured prefix is invalid, even when
            unprefixed mode makes it unused
    """
    prefix_validate(options.prefix)

    if options.unprefixed:
        return ModeSelection(
            pattern=UNPREFIXED_PATTERN,
            prefix=None,
            handler_kind=HandlerKind.UNPREFIXED,
        )

    if options.prefix:
        return ModeSelection(
            pattern=prefixedPattern_build(options.prefix),
            prefix=options.prefix,
            handler_kind=HandlerKind.PREFIXED,
        )

    return ModeSelection(
        pattern=DEFAULT_PATTERN,
        prefix=DEFAULT_PREFIX,
        handler_kind=HandlerKind.PREFIXED,
    )


def token_parse(mode: ModeSelection, text: str) -> ParsedToken:
    """Parse one token into a tagged result.

    Args:
        mode: Active mode selection
        text: Candidate token text, including both `@` delimiters

    Returns:
        ParsedToken tagged WELLFORMED, MISSING_PREFIX or NOMATCH
    """
    match: re.Match | None = mode.pattern.fullmatch(text)
    if match is None:
        return ParsedToken(kind=TokenKind.NOMATCH)

    if mode.handler_kind is HandlerKind.UNPREFIXED:
        return ParsedToken(kind=TokenKind.WELLFORMED, key=match.group(1))

    if match.group(1) is None:
        return ParsedToken(kind=TokenKind.MISSING_PREFIX, key=match.group(2))

    return ParsedToken(
        kind=TokenKind.WELLFORMED, prefix=match.group(1)[:-1], key=match.group(2)
    )
