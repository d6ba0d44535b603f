"""
settings.py

This module provides application configuration management for replacetmpl.

Features:
- Centralized application configuration using Pydantic settings
- Constants for the token wire format shared by the engine

Usage:
Import appsettings for application configuration values.
"""

from typing import Final
from pydantic_settings import BaseSettings, SettingsConfigDict

# Prefix used when neither a custom prefix nor unprefixed mode is configured
DEFAULT_PREFIX: Final[str] = "package"

# Characters allowed in prefixes and keys
TOKEN_CHARACTERS: Final[str] = "[a-zA-Z0-9]"

# Characters of surrounding text shown on each side of a problematic token
CONTEXT_CHARACTERS: Final[int] = 20


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with RTM_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        debug_mode: Print the resolved prefix and replacement table
        templateGlob: Glob selecting template files below the input directory
        templateSuffix: Suffix stripped from template files on output
        contextCharacters: Context shown around tokens in diagnostics
    """

    beQuiet: bool = False
    debug_mode: bool = False

    templateGlob: str = "**/*.tmpl"
    templateSuffix: str = ".tmpl"

    contextCharacters: int = CONTEXT_CHARACTERS

    model_config = SettingsConfigDict(
        env_prefix="RTM_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
    )


# Create the application settings instance
appsettings: Final[App] = App()
