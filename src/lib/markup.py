"""
Entry points: markup string in, styled string out

    colorize("some <🔴>red</🔴> text")  →  "some \x1b[31mred\x1b[0m text"

Both functions are pure: no I/O, no logging, no state kept between
calls beyond the shared read-only style registry.
"""

from typing import Mapping, Optional

from .parser import Parser
from .renderer import Renderer
from .styles import StyleRegistry, registry_default


def colorize(source: str, registry: Optional[StyleRegistry] = None) -> str:
    """
    Convert tag markup into text with terminal escape codes

    Pipeline: tokenize → build node tree → render with the style stack.

    Args:
        source: Markup such as "<🔴>a <u>b</u> c</🔴>"
        registry: Style lookup (defaults to the shared registry)

    Returns:
        Styled string. Never raises for any input: unknown tags and
        mismatched close tags come out as literal text.

    Example:
        >>> colorize("<red>a <u>b</u> c</red>")
        '\\x1b[31ma \\x1b[4mb\\x1b[0m\\x1b[31m c\\x1b[0m'
    """
    nodes = Parser(source).parse()
    return Renderer(registry).render(nodes, [])


def strip(source: str, registry: Optional[StyleRegistry] = None) -> str:
    """
    Remove recognized tags, keeping their text

    Unknown tags are left in place exactly as colorize() would leave them.

    Example:
        >>> strip("<🔴>red</🔴> and <x>y</x>")
        'red and <x>y</x>'
    """
    nodes = Parser(source).parse()
    return Renderer(registry, plain=True).render(nodes, [])


def emoji_to_ansi() -> Mapping[str, str]:
    """Read-only mapping of each primary emoji to its escape code"""
    return registry_default().emoji_toAnsi()
