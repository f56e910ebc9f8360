"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState connected to the current
context. Library callers that never connect a state get no log output, so
colorize() stays silent when used as a plain function.

Usage:
    from emojicolors.lib.log import LOG, state_connectToLogger

    # At start of the CLI pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Colorizing 3 files", level=1)
    LOG("Loaded style table", level=2)
    LOG("Token stream for notes.txt: ...", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def state_disconnectFromLogger() -> None:
    """Detach any ProgramState from the logging context"""
    _program_state.set(None)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
