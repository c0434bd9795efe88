"""
slotsmith - Component inlining for static HTML sites

Walks HTML page sources, finds custom tags, and inlines the matching
component templates with attribute merging and slot projection.
"""

__version__ = "1.0.0"

from .lib import Builder, Expander, ComponentRegistry, LOG, state_connectToLogger

__all__ = ["Builder", "Expander", "ComponentRegistry", "LOG", "state_connectToLogger", "__version__"]
