"""
emojicolors - Emoji tag markup to terminal colors

Turns "<🔴>red</🔴>" style markup into ANSI-colored text, re-applying
enclosing styles after every nested tag closes.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .lib import (
    colorize,
    strip,
    emoji_to_ansi,
    Parser,
    Renderer,
    StyleRegistry,
    StyleTableError,
    LOG,
    state_connectToLogger,
)
from .lib.emoji import (
    EMOJI_BLACK,
    EMOJI_RED,
    EMOJI_GREEN,
    EMOJI_YELLOW,
    EMOJI_BLUE,
    EMOJI_MAGENTA,
    EMOJI_CYAN,
    EMOJI_WHITE,
    EMOJI_BOLD_BLACK,
    EMOJI_BOLD_RED,
    EMOJI_BOLD_GREEN,
    EMOJI_BOLD_YELLOW,
    EMOJI_BOLD_BLUE,
    EMOJI_BOLD_MAGENTA,
    EMOJI_BOLD_CYAN,
    EMOJI_BOLD_WHITE,
    EMOJI_BOLD,
    EMOJI_HIGH_INTENSITY,
    EMOJI_UNDERLINE,
    ANSI_RESET,
)

__all__ = [
    "colorize",
    "strip",
    "emoji_to_ansi",
    "Parser",
    "Renderer",
    "StyleRegistry",
    "StyleTableError",
    "LOG",
    "state_connectToLogger",
    "EMOJI_BLACK",
    "EMOJI_RED",
    "EMOJI_GREEN",
    "EMOJI_YELLOW",
    "EMOJI_BLUE",
    "EMOJI_MAGENTA",
    "EMOJI_CYAN",
    "EMOJI_WHITE",
    "EMOJI_BOLD_BLACK",
    "EMOJI_BOLD_RED",
    "EMOJI_BOLD_GREEN",
    "EMOJI_BOLD_YELLOW",
    "EMOJI_BOLD_BLUE",
    "EMOJI_BOLD_MAGENTA",
    "EMOJI_BOLD_CYAN",
    "EMOJI_BOLD_WHITE",
    "EMOJI_BOLD",
    "EMOJI_HIGH_INTENSITY",
    "EMOJI_UNDERLINE",
    "ANSI_RESET",
    "__version__",
]
