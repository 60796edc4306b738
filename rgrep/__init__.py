"""
rgrep - line-oriented literal text search.

Provides:
- Literal pattern compilation with case, word and line matching
- Context-aware match grouping (before/after context, group separators)
- Single-file and recursive directory search
- Match counting, line numbers and highlighted output
"""

__version__ = "0.1.0"
