"""
slotsmith - Component inlining for static HTML sites

Expands custom tags in page sources into their component templates.
"""

__version__ = "1.0.0"

from .attributes import attributes_parse, attributes_inject
from .slots import slot_inject
from .tags import closeTag_findMatching, ComponentError, UnterminatedTagError
from .components import ComponentRegistry
from .expander import Expander
from .builder import Builder
from .log import LOG, state_connectToLogger

__all__ = [
    "attributes_parse",
    "attributes_inject",
    "slot_inject",
    "closeTag_findMatching",
    "ComponentError",
    "UnterminatedTagError",
    "ComponentRegistry",
    "Expander",
    "Builder",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
