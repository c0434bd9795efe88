"""
Models package for slotsmith

Contains data structures and type definitions for the build pipeline.
"""

from .state import ProgramState, pipeline
from .tags import NATIVE_TAGS, native_is
from .component import TagOccurrence, ParsedAttributes, Page, ExpansionResult

__all__ = [
    "ProgramState",
    "pipeline",
    "NATIVE_TAGS",
    "native_is",
    "TagOccurrence",
    "ParsedAttributes",
    "Page",
    "ExpansionResult",
]
