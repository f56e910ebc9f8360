"""
Tokenizer and parser data models

Type-safe structures passed between the tokenizer and the tree builder.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.parser import Node, TagNode


class TokenKind(Enum):
    """
    Kinds of token produced by the tokenizer
    """
    TEXT = "text"        # literal run of characters
    MARKER = "marker"    # <name> or </name>, brackets included


@dataclass
class Token:
    """
    A single piece of tokenized source

    Returned (in source order) by lexer.source_tokenize(). Joining every
    token's value gives back the original source.

    Attributes:
        kind: TokenKind.TEXT or TokenKind.MARKER
        value: The raw substring (markers keep their brackets and slash)
        position: Character offset of the token in the source

    Example:
        For source "a<🔴>b" the tokens are:
        Token(TEXT, "a", 0), Token(MARKER, "<🔴>", 1), Token(TEXT, "b", 4)
    """
    kind: TokenKind
    value: str
    position: int = 0

    @property
    def is_marker(self) -> bool:
        return self.kind is TokenKind.MARKER

    @property
    def is_closing(self) -> bool:
        """True for </name> markers"""
        return self.is_marker and self.value.startswith("</")

    @property
    def name(self) -> str:
        """
        Tag name of a marker with the surrounding delimiters stripped

        "<🔴>" → "🔴", "</red>" → "red". Text tokens have no name.
        """
        if not self.is_marker:
            return ""
        prefix = 2 if self.is_closing else 1
        return self.value[prefix:-1]


@dataclass
class Frame:
    """
    Open-tag entry on the parser stack

    Attributes:
        name: Name of the open tag, compared against closing markers
        node: The TagNode whose children are being accumulated
        parent: Insertion list the TagNode itself was appended to; becomes
                the insertion point again once the tag is closed
    """
    name: str
    node: 'TagNode'
    parent: List['Node']
