"""
Replacement table construction.

Merges one or more replacement sources into the single read-only lookup used
by the match handlers. When a key appears in several sources, the value from
the first source in the supplied order wins.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeAlias
from replacetmpl.lib.log import LOG

ReplacementSource: TypeAlias = Mapping[str, Any]
ReplacementTable: TypeAlias = Mapping[str, Any]


def replacements_merge(
    replacements: ReplacementSource | Sequence[ReplacementSource],
) -> ReplacementTable:
    """Merge replacement sources into one table.

    Args:
        replacements: A single mapping, or an ordered sequence of mappings
            where earlier mappings take precedence over later ones

    Returns:
        Read-only mapping of key to replacement value

    Raises:
        TypeError: If a source is not a mapping
    """
    if isinstance(replacements, Mapping):
        return MappingProxyType(dict(replacements))

    if isinstance(replacements, (str, bytes)) or not isinstance(
        replacements, Sequence
    ):
        raise TypeError(
            f"Replacements must be a mapping or a sequence of mappings, "
            f"not {type(replacements).__name__}"
        )

    merged: dict[str, Any] = {}
    for index, source in enumerate(replacements):
        if not isinstance(source, Mapping):
            raise TypeError(
                f"Replacement source {index} is a {type(source).__name__}, "
                f"not a mapping"
            )
        for key, value in source.items():
            if key in merged:
                LOG(f"Key '{key}' from source {index} shadowed by earlier source")
                continue
            merged[key] = value

    return MappingProxyType(merged)
