"""
emojicolors - Emoji tag markup to terminal colors

Tokenizer, tree builder, style registry and renderer.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .lexer import EmojiTagLexer, source_tokenize, source_highlight
from .parser import Parser, Node, TextNode, TagNode
from .styles import StyleRegistry, StyleTableError, registry_default
from .renderer import Renderer
from .markup import colorize, strip, emoji_to_ansi
from .log import LOG, state_connectToLogger

__all__ = [
    "EmojiTagLexer",
    "source_tokenize",
    "source_highlight",
    "Parser",
    "Node",
    "TextNode",
    "TagNode",
    "StyleRegistry",
    "StyleTableError",
    "registry_default",
    "Renderer",
    "colorize",
    "strip",
    "emoji_to_ansi",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
