"""
Parser for <tag>...</tag> markup

Transforms a token stream into a forest of text and tag nodes.

The parser makes a single left-to-right pass:
1. Tokenizing: lexer.source_tokenize() splits text from markers
2. Tree building: an explicit frame stack matches open and close markers

Key features:
- Mismatched close markers are kept as literal text and close nothing
- Unterminated open markers simply own everything up to end of input
- Nesting ceiling (appsettings.max_nesting_depth) keeps rendering bounded
- Never raises: every input string produces a tree

Example:
    >>> nodes = Parser("a <🔴>b</🔴>").parse()
    >>> nodes[1].name
    '🔴'
    >>> nodes[1].children[0].content
    'b'
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..models.parser import Frame, Token
from .lexer import source_tokenize


@dataclass
class TextNode:
    """
    Literal text leaf

    Attributes:
        content: Text emitted unchanged by the renderer
    """
    content: str


@dataclass
class TagNode:
    """
    A tag and everything between its open and close markers

    Attributes:
        name: Tag name without brackets or slash (e.g., "🔴", "bold-red")
        children: Nodes lexically inside the tag, in order; owned exclusively
                  by this node

    Example:
        For source "<red>a<b>b</b></red>":
        TagNode(
            name="red",
            children=[
                TextNode(content="a"),
                TagNode(name="b", children=[TextNode(content="b")])
            ]
        )
    """
    name: str
    children: List['Node'] = field(default_factory=list)


Node = Union[TextNode, TagNode]


class Parser:
    """
    Tree builder for <tag> markup

    Handles:
    - Nested tags, matched with stack discipline
    - Mismatched and stray close markers (kept as text)
    - Unterminated tags (closed implicitly at end of input)
    - Pathologically deep nesting (kept as text past the ceiling)
    """

    def __init__(
        self,
        source: Union[str, Sequence[Token]],
        max_depth: Optional[int] = None,
    ):
        """
        Initialize parser with source text or pre-tokenized input

        Args:
            source: Raw markup text, or tokens from lexer.source_tokenize()
            max_depth: Nesting ceiling (defaults to appsettings.max_nesting_depth)

        Attributes:
            tokens: Token stream being parsed
            max_depth: Deepest nesting built as TagNodes
            ast: Top-level nodes
            stack: Frames of currently open tags, outermost first
            current: Insertion point (children list of the innermost open tag)
            suppressed: (name, depth) of open markers kept as text past the
                        ceiling, depth being the number of frames open then
        """
        from ..config import appsettings

        self.tokens: List[Token] = (
            source_tokenize(source) if isinstance(source, str) else list(source)
        )
        self.max_depth = appsettings.max_nesting_depth if max_depth is None else max_depth
        self.ast: List[Node] = []
        self.stack: List[Frame] = []
        self.current: List[Node] = self.ast
        self.suppressed: List[Tuple[str, int]] = []

    def parse(self) -> List[Node]:
        """
        Build the node forest from the token stream

        Frames still open at end of input are left as they are: their
        children run to the end of the source.

        Returns:
            List of top-level nodes. Empty list for empty source.

        Example:
            >>> nodes = Parser("<red>a</blue>").parse()
            >>> [type(n).__name__ for n in nodes[0].children]
            ['TextNode', 'TextNode']
        """
        self.ast = []
        self.stack = []
        self.current = self.ast
        self.suppressed = []

        for token in self.tokens:
            if not token.is_marker:
                self.text_append(token.value)
            elif token.is_closing:
                self.closeMarker_handle(token)
            else:
                self.openMarker_handle(token)

        return self.ast

    def openMarker_handle(self, token: Token) -> None:
        """
        Open a new tag at the current insertion point

        Past the nesting ceiling the marker is kept as text and remembered,
        so that its own close marker is kept as text too.
        """
        if len(self.stack) >= self.max_depth:
            self.suppressed.append((token.name, len(self.stack)))
            self.text_append(token.value)
            return

        node = TagNode(name=token.name)
        self.current.append(node)
        self.stack.append(Frame(name=token.name, node=node, parent=self.current))
        self.current = node.children

    def closeMarker_handle(self, token: Token) -> None:
        """
        Close the innermost tag if the names match

        A close marker that does not match the innermost open tag (or
        arrives with nothing open) is appended as literal text and the
        stack is left untouched.

        Suppressed markers only pair with close markers inside the frame
        they were opened in; closing that frame forgets them.
        """
        name = token.name

        if self.suppressed and self.suppressed[-1] == (name, len(self.stack)):
            self.suppressed.pop()
            self.text_append(token.value)
            return

        if self.stack and self.stack[-1].name == name:
            frame = self.stack.pop()
            self.current = frame.parent
            while self.suppressed and self.suppressed[-1][1] > len(self.stack):
                self.suppressed.pop()
            return

        self.text_append(token.value)

    def text_append(self, content: str) -> None:
        """Append a text leaf at the current insertion point"""
        if content:
            self.current.append(TextNode(content=content))

    @property
    def depth(self) -> int:
        """Number of tags currently open"""
        return len(self.stack)
