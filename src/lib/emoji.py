"""
Emoji tag names of the bundled style table

Primary symbol of every style, for callers that build markup in code:

    from emojicolors import colorize, EMOJI_RED
    colorize(f"<{EMOJI_RED}>failed</{EMOJI_RED}>")
"""

# standard colors
EMOJI_BLACK = "⚫"
EMOJI_RED = "🔴"
EMOJI_GREEN = "🟢"
EMOJI_YELLOW = "🟡"
EMOJI_BLUE = "🔵"
EMOJI_MAGENTA = "🟣"
EMOJI_CYAN = "🥶"
EMOJI_WHITE = "⚪"

# bold colors
EMOJI_BOLD_BLACK = "⬛\ufe0f"
EMOJI_BOLD_RED = "🟥"
EMOJI_BOLD_GREEN = "🟩"
EMOJI_BOLD_YELLOW = "🟨"
EMOJI_BOLD_BLUE = "🟦"
EMOJI_BOLD_MAGENTA = "🟪"
EMOJI_BOLD_CYAN = "🧊"
EMOJI_BOLD_WHITE = "⬜"

# dedicated modifiers
EMOJI_BOLD = "🧱"
EMOJI_HIGH_INTENSITY = "💎"
EMOJI_UNDERLINE = "🔳"

ANSI_RESET = "\x1b[0m"
