"""Context-aware line search over files and directory trees.

Usage:
    from rgrep.interfaces import SearchConfig
    from rgrep.search import Renderer, SearchService

    config = SearchConfig(before_context=1, after_context=1, line_number=True)
    service = SearchService.create("MATCH", config=config)
    renderer = Renderer.for_config(config)

    for record in service.search_path("notes.txt"):
        print(renderer.render(record))
"""

from .engine import ContextSearchEngine, search
from .render import PlainFormatter, Renderer, StyledFormatter, highlight
from .service import SearchService
from .sources import load_document, read_text, split_lines, walk_files

__all__ = [
    "ContextSearchEngine",
    "search",
    "SearchService",
    "Renderer",
    "PlainFormatter",
    "StyledFormatter",
    "highlight",
    "load_document",
    "read_text",
    "split_lines",
    "walk_files",
]
