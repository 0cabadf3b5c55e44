"""
lolmark log output

LOG() writes to stderr through loguru when the ProgramState connected for
the current context asks for enough verbosity. Nothing is printed until a
state is connected, so the compiler stays quiet when used as a library or
under pytest. diagnostic_emit() is where parser diagnostics (comments,
titles, media URLs) go when no other sink is given.

The CLI connects its state once in main(); compiler stages then call
LOG(message, level=N) without passing the state around.
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# ProgramState of the running CLI invocation, if any
_program_state: ContextVar[Optional[Any]] = ContextVar('lolmark_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<magenta>lolmark</magenta> │ "
    "<cyan>{module}.{function}</cyan>:<cyan>{line}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """Make `state.verbosity` the threshold for LOG() in this context"""
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log a compiler progress message at the given verbosity.

    Args:
        message: Text to write
        level: 1 for stage progress and diagnostics, 2 for paths and
            compile steps (-v), 3 for token counts and variable traces (-vv)
        **kwargs: Passed on to loguru

    Example:
        LOG(f"Lexer produced {len(tokens)} tokens", level=3)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def diagnostic_emit(message: str) -> None:
    """Default parser diagnostics sink: normal-verbosity log line"""
    LOG(message, level=1)
