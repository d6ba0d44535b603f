"""
Engine package for replacetmpl token substitution.

Provides the replacement table builder, pattern selector, match handlers and
diagnostic reporting behind a single `transform_create` entry point.
"""

from .base import TemplateTransform, transform_create
from .diagnostics import (
    CollectingSink,
    ConsoleSink,
    DiagnosticReporter,
    DiagnosticSink,
)
from .handlers import PrefixedMatchHandler, UnprefixedMatchHandler
from .pattern import pattern_select, prefix_validate, token_parse
from .table import replacements_merge

__all__ = [
    "TemplateTransform",
    "transform_create",
    "CollectingSink",
    "ConsoleSink",
    "DiagnosticReporter",
    "DiagnosticSink",
    "PrefixedMatchHandler",
    "UnprefixedMatchHandler",
    "pattern_select",
    "prefix_validate",
    "token_parse",
    "replacements_merge",
]
