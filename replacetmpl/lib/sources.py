"""
Replacement source loading for the plugin.

Each replacement source is a JSON file holding one object of key/value
pairs. Sources are returned in the order given so that the engine's
first-listed-wins precedence follows the command line.
"""

import json
from pathlib import Path
from typing import Any, Final
from replacetmpl.lib.engine.pattern import NAME_PATTERN
from replacetmpl.lib.errors import ReplacementSourceError
from replacetmpl.lib.log import LOG

JSON_ENCODING: Final[str] = "utf-8"


def source_load(path: Path) -> dict[str, Any]:
    """Read one replacement source.

    Keys that can never appear in a token are kept but logged.

    Args:
        path: JSON file holding an object

    Returns:
        The decoded object

    Raises:
        ReplacementSourceError: If the file is unreadable, is not valid JSON
            or does not hold an object
    """
    try:
        with open(path, "r", encoding=JSON_ENCODING) as f:
            data: Any = json.load(f)
    except OSError as e:
        raise ReplacementSourceError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise ReplacementSourceError(str(path), f"invalid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise ReplacementSourceError(
            str(path), f"expected a JSON object, found {type(data).__name__}"
        )

    for key in data:
        if not NAME_PATTERN.fullmatch(key):
            LOG(f"Key '{key}' in {path} can never match a token")

    LOG(f"Loaded {len(data)} replacement(s) from {path}")
    return data


def sources_load(paths: list[Path]) -> list[dict[str, Any]]:
    """Read replacement sources in command-line order."""
    return [source_load(path) for path in paths]
