"""
Pygments lexer and tokenizer for emojicolors markup

The same RegexLexer serves two purposes:
1. Tokenizing: source_tokenize() drives the lexer directly and turns its
   stream into Token objects for the parser
2. Highlighting: source_highlight() shows markup source with tags colored

Token types:
- Name.Tag: Opening markers (e.g., <🔴>, <red>)
- Name.Builtin: Closing markers (e.g., </🔴>, </red>)
- Text: Everything else, including a lone '<' with no closing '>'
"""

from typing import List

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer
from pygments.token import Name, Text

from ..models.parser import Token, TokenKind


class EmojiTagLexer(RegexLexer):
    """
    Lexer for emojicolors markup

    Example:
        some <🔴>red</🔴> text

    Tokens:
        "some " → Text
        <🔴> → Name.Tag
        red → Text
        </🔴> → Name.Builtin
        " text" → Text
    """

    name = 'Emojicolors'
    aliases = ['emojicolors', 'emojitags']
    filenames = ['*.ect']

    tokens = {
        'root': [
            # Closing markers: </name> (</> included, its name is empty)
            (r'</[^>]*>', Name.Builtin),

            # Opening markers: '<' + one or more non-'>' + '>'
            (r'<[^>]+>', Name.Tag),

            # Everything else is text
            (r'[^<]+', Text),
            (r'<', Text),
        ],
    }


def get_lexer() -> EmojiTagLexer:
    """
    Get the EmojiTagLexer instance

    Returns:
        EmojiTagLexer instance ready for use with Pygments
    """
    return EmojiTagLexer()


def source_tokenize(source: str) -> List[Token]:
    """
    Split source into text and marker tokens

    Uses get_tokens_unprocessed() rather than get_tokens() so Pygments'
    input filters (newline stripping, tab expansion, trailing newline)
    never touch the text. Adjacent text fragments are merged, so markers
    are always separated by at most one text token.

    Args:
        source: Raw markup text

    Returns:
        Tokens in source order; joining their values gives back source

    Example:
        >>> [t.value for t in source_tokenize("a <🔴>b</🔴>")]
        ['a ', '<🔴>', 'b', '</🔴>']
    """
    tokens: List[Token] = []

    for position, tokentype, value in get_lexer().get_tokens_unprocessed(source):
        if not value:
            continue

        if tokentype in Name:
            tokens.append(Token(kind=TokenKind.MARKER, value=value, position=position))
        elif tokens and tokens[-1].kind is TokenKind.TEXT:
            # Lone '<' fragments are glued onto the surrounding text run
            tokens[-1].value += value
        else:
            tokens.append(Token(kind=TokenKind.TEXT, value=value, position=position))

    return tokens


def source_highlight(source: str) -> str:
    """
    Highlight markup source for terminal display

    Args:
        source: Raw markup text

    Returns:
        Source with tags colored by Pygments' TerminalFormatter
    """
    return highlight(source, get_lexer(), TerminalFormatter())
