"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use EMOJICOLORS_ prefix (e.g., EMOJICOLORS_MAX_NESTING_DEPTH=64).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use EMOJICOLORS_ prefix.

    Examples:
        EMOJICOLORS_MAX_NESTING_DEPTH=64
        EMOJICOLORS_STYLES_FILE=~/.config/emojicolors/styles.yaml
        EMOJICOLORS_NORMALIZE_VARIANTS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="EMOJICOLORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parser configuration. The renderer spends two stack frames per level,
    # so the ceiling stays well under the default recursion limit of 1000.
    max_nesting_depth: int = Field(
        default=256,
        ge=1,
        le=400,
        description="Deepest tag nesting the parser builds; deeper open tags are kept as literal text",
    )

    # Style table configuration
    styles_file: Optional[str] = Field(
        default=None,
        description="Path to a custom YAML style table (defaults to the bundled table)",
    )

    normalize_variants: bool = Field(
        default=True,
        description="Strip emoji presentation selectors (U+FE0E/U+FE0F) from tag names before lookup",
    )

    debug_mode: bool = Field(
        default=False,
        description="Run the command line pipeline at full verbosity",
    )

    # CLI configuration
    input_pattern: str = Field(
        default="**/*.txt",
        description="Glob (relative to inputdir) selecting markup files to colorize",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
