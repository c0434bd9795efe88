"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing.

Usage:
    from lib.log import LOG, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Per-page progress", level=1)
    LOG("Rewrite details", level=2)
    LOG("Scan trace", level=3)

Messages starting with "Warning:" are emitted at loguru's WARNING level.
Without a connected state (library use, tests) nothing is logged.
"""

import sys
from contextvars import ContextVar
from typing import Any, Optional

from loguru import logger

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="TRACE")

# Verbosity level -> loguru level
_LEVELS = {1: "INFO", 2: "DEBUG", 3: "TRACE"}


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of each pipeline function to make the state's
    verbosity setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Example:
        LOG("src/pages/index.html", level=1)
        LOG("Rewrote <card> at 120", level=2)
        LOG("Skipping <my-widget>: no component", level=3)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        if message.startswith("Warning:"):
            logger.opt(depth=1).warning(message, **kwargs)
        else:
            logger.opt(depth=1).log(_LEVELS.get(level, "TRACE"), message, **kwargs)
