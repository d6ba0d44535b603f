"""
Configuration errors raised by replacetmpl.

Only configuration problems are exceptions. Problems with individual tokens
are reported as diagnostics and never raised.
"""


class ReplaceTmplError(ValueError):
    """Base class for fatal, configuration-time errors."""


class MissingReplacements(ReplaceTmplError):
    """No replacement source was supplied."""

    def __init__(self) -> None:
        super().__init__("Replacements missing")


class InvalidPrefix(ReplaceTmplError):
    """The configured prefix contains characters outside [a-zA-Z0-9]."""

    def __init__(self, prefix: str) -> None:
        self.prefix: str = prefix
        super().__init__(f"Invalid prefix '{prefix}', only [a-zA-Z0-9] allowed")


class ReplacementSourceError(ReplaceTmplError):
    """A replacement source file could not be read as a JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        self.path: str = path
        super().__init__(f"Cannot load replacements from {path}: {reason}")
