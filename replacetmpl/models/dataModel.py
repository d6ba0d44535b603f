"""
dataModel.py

This module defines the data models used throughout replacetmpl.
The models leverage Pydantic for validation and type safety.

Features:
- Engine configuration (prefix, unprefixed mode, debug output)
- Resolved mode selection (pattern, prefix, handler kind)
- Tagged token parse results
- Diagnostics for problematic tokens
- Match handler outcomes

Usage:
Import these models to validate and structure data used in the engine.
"""

import re
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class HandlerKind(Enum):
    """
    Enum for the match handler variant bound by the engine.
    """

    PREFIXED = 1
    UNPREFIXED = 2


class TokenKind(Enum):
    """
    Enum for the result of parsing a single token.

    Attributes:
        WELLFORMED: Token carries the expected prefix (or needs none)
        MISSING_PREFIX: Prefixed mode, but the token lacks `<prefix>.`
        NOMATCH: Text is not a token at all
    """

    WELLFORMED = 1
    MISSING_PREFIX = 2
    NOMATCH = 3


class EngineOptions(BaseModel):
    """
    Configuration supplied once, at engine construction.

    Attributes:
        prefix (Optional[str]): Key prefix, default "package" when unset.
        unprefixed (bool): Match `@key@` tokens; overrides `prefix`.
        debug (bool): Print resolved prefix and replacement table.
    """

    prefix: Optional[str] = Field(
        default=None, description="Key prefix, only [a-zA-Z0-9] allowed."
    )
    unprefixed: bool = Field(default=False, description="Tokens carry no prefix.")
    debug: bool = Field(default=False, description="Print debug output.")


class ModeSelection(BaseModel):
    """
    Result of resolving the engine mode.

    Attributes:
        pattern (re.Pattern): Compiled token pattern.
        prefix (Optional[str]): Active prefix, None in unprefixed mode.
        handler_kind (HandlerKind): Match handler variant to bind.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    pattern: re.Pattern
    prefix: Optional[str] = None
    handler_kind: HandlerKind


class ParsedToken(BaseModel):
    """Tagged result of parsing one token.

    Attributes:
        kind: What kind of token this is
        prefix: The prefix segment without the dot, if present
        key: The replacement key, if the text is a token
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    prefix: str | None = None
    key: str | None = None


class Diagnostic(BaseModel):
    """Report of a token that could not be resolved or was malformed.

    Attributes:
        match: The offending token text
        offset: Character index of the token in the full text
        line: 1-based line number of the token
        path: Relative path of the file being processed
        message: Human-readable problem description
        before: Context preceding the token
        after: Context following the token
        leading_ellipsis: Whether text before the context was cut off
        trailing_ellipsis: Whether the context reaches the end of the text
    """

    model_config = ConfigDict(frozen=True)

    match: str
    offset: int
    line: int
    path: str
    message: str
    before: str
    after: str
    leading_ellipsis: bool
    trailing_ellipsis: bool


class MatchOutcome(BaseModel):
    """Result of handling one match.

    Attributes:
        text: Substitution text, empty if the token was removed
        diagnostic: Problem reported for the token, if any
    """

    text: str
    diagnostic: Diagnostic | None = None
