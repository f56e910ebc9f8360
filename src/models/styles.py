"""
Style specification and metadata models

Defines the structure and categories of terminal styles for the
style registry and the bundled style table.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Tuple


# Emoji presentation selectors: text style (VS15) and emoji style (VS16)
VARIATION_SELECTORS: str = "\ufe0e\ufe0f"


class StyleCategory(Enum):
    """
    Categories of terminal styles

    Used for organization of the style table and validation.
    """
    COLOR = "color"              # <🔴>, <red>, <r>
    BOLD_COLOR = "bold-color"    # <🟥>, <bold-red>
    MODIFIER = "modifier"        # <🧱>, <💎>, <🔳>


@dataclass(frozen=True)
class StyleSpec:
    """
    Specification for a single terminal style

    Attributes:
        name: Canonical style name (e.g., "red", "bold-red", "underline")
        category: Category for organization
        code: Escape sequence emitted when the style opens
        symbols: Emoji aliases, primary symbol first
        keywords: Textual aliases (full name, abbreviations)

    Example:
        StyleSpec(
            name="red",
            category=StyleCategory.COLOR,
            code="\\x1b[31m",
            symbols=("🔴", "❤"),
            keywords=("red", "r"),
        )
    """
    name: str
    category: StyleCategory
    code: str
    symbols: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()

    @property
    def primary(self) -> str:
        """Primary symbol, or the canonical name when the style has no symbol"""
        return self.symbols[0] if self.symbols else self.name

    @property
    def aliases(self) -> List[str]:
        """Every name this style answers to"""
        return [*self.symbols, *self.keywords]


def name_normalize(name: str) -> str:
    """
    Strip emoji presentation selectors from a tag name

    "⬛\\ufe0f" and "⬛" both normalize to "⬛". Keyword names pass
    through unchanged.
    """
    return "".join(ch for ch in name if ch not in VARIATION_SELECTORS)
