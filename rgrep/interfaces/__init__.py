"""
rgrep interfaces.

This module exports the data types passed between the search engine,
the search service and the renderer.
"""

from .search import (
    CountRecord,
    Formatter,
    LineRecord,
    OutputRecord,
    SearchConfig,
    SeparatorRecord,
    TraversalContext,
)

__all__ = [
    "SearchConfig",
    "TraversalContext",
    "LineRecord",
    "SeparatorRecord",
    "CountRecord",
    "OutputRecord",
    "Formatter",
]
