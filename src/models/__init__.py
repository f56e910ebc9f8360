"""
Models package for emojicolors

Contains data structures and type definitions for the colorizing pipeline.
"""

from .state import ProgramState, pipeline
from .styles import StyleSpec, StyleCategory, VARIATION_SELECTORS, name_normalize
from .parser import Token, TokenKind, Frame

__all__ = [
    "ProgramState",
    "pipeline",
    "StyleSpec",
    "StyleCategory",
    "VARIATION_SELECTORS",
    "name_normalize",
    "Token",
    "TokenKind",
    "Frame",
]
