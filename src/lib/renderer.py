"""
Renderer for the emojicolors node tree

Transforms parsed nodes into a string with embedded terminal escape codes.
"""

from typing import Optional, Sequence

from .parser import Node, TextNode
from .styles import StyleRegistry, registry_default


class Renderer:
    """
    Renders a node forest to styled text

    Responsibilities:
    - Emit text leaves unchanged
    - Open recognized tags with their style code
    - Close recognized tags with the clear code, then re-apply every
      enclosing style (the clear code wipes ancestors' styling too)
    - Pass unknown tags through literally, without touching the style stack
    """

    def __init__(self, registry: Optional[StyleRegistry] = None, plain: bool = False) -> None:
        """
        Initialize renderer

        Args:
            registry: Style lookup (defaults to the shared registry)
            plain: Drop all codes; recognized tags vanish, their text remains
        """
        self.registry = registry if registry is not None else registry_default()
        self.plain = plain

    def render(self, nodes: Sequence[Node], active: Sequence[str] = ()) -> str:
        """
        Render a sequence of sibling nodes

        Args:
            nodes: Nodes to render, in order
            active: Codes of the enclosing recognized tags, outermost first

        Returns:
            Rendered string
        """
        parts = []

        for node in nodes:
            parts.append(self.node_render(node, active))

        return ''.join(parts)

    def node_render(self, node: Node, active: Sequence[str]) -> str:
        """
        Render a single node

        For a recognized tag with code C inside ancestors A1..An:
            C + children(A1..An, C) + CLEAR + A1 + ... + An
        """
        if isinstance(node, TextNode):
            return node.content

        code = self.registry.get(node.name)

        if code is None:
            # Unknown tag: literal, transparent to styling
            inner = self.render(node.children, active)
            return f"<{node.name}>{inner}</{node.name}>"

        if self.plain:
            return self.render(node.children, active)

        inner = self.render(node.children, [*active, code])
        return code + inner + self.registry.clear + ''.join(active)
