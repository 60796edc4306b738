"""Regex-backed literal matching.

Queries are always literal text: they are escaped before compilation and
only the anchors requested by the word/line flags are added around them.
"""

from __future__ import annotations

import re

from rgrep.types.errors import ErrorContext, PatternCompileError, RecoveryAction
from rgrep.utils.logger import logger

from .matcher import Matcher, Span


def build_pattern(query: str, word_regexp: bool = False, line_regexp: bool = False) -> str:
    """Build the regex source for a literal query.

    Args:
        query: Raw query text, matched literally.
        word_regexp: Require word boundaries on both sides.
        line_regexp: Require the match to span the whole line.

    Returns:
        Regex source string.
    """
    pattern = re.escape(query)

    if word_regexp:
        pattern = rf"\b{pattern}\b"
    if line_regexp:
        pattern = rf"^{pattern}\Z"

    return pattern


class RegexMatcher(Matcher):
    """Matcher wrapping a compiled regular expression.

    Usage:
        matcher = compile_pattern("me", word_regexp=True)
        matcher.test("me.")        # True
        matcher.test("method")     # False
        matcher.find_spans("me me")  # [Span(0, 2), Span(3, 5)]
    """

    def __init__(self, regex: re.Pattern):
        """Initialize with a compiled regex.

        Args:
            regex: Compiled pattern used for both testing and span lookup.
        """
        self._regex = regex

    @property
    def pattern(self) -> str:
        """The regex source this matcher was compiled from."""
        return self._regex.pattern

    @property
    def ignore_case(self) -> bool:
        return bool(self._regex.flags & re.IGNORECASE)

    def test(self, line: str) -> bool:
        return self._regex.search(line) is not None

    def find_spans(self, line: str) -> list[Span]:
        # Zero-width matches (empty query) select the line but highlight nothing
        return [
            Span(m.start(), m.end())
            for m in self._regex.finditer(line)
            if m.end() > m.start()
        ]

    def __repr__(self) -> str:
        return f"RegexMatcher(pattern={self.pattern!r}, ignore_case={self.ignore_case})"


def compile_pattern(
    query: str,
    ignore_case: bool = False,
    word_regexp: bool = False,
    line_regexp: bool = False,
) -> RegexMatcher:
    """Compile a literal query into a line matcher.

    Args:
        query: Raw query text.
        ignore_case: Match without regard to case.
        word_regexp: Only match whole words.
        line_regexp: Only match whole lines.

    Returns:
        Compiled RegexMatcher.

    Raises:
        PatternCompileError: If the regex engine rejects the built pattern.
    """
    source = build_pattern(query, word_regexp=word_regexp, line_regexp=line_regexp)
    flags = re.IGNORECASE if ignore_case else 0

    try:
        regex = re.compile(source, flags)
    except re.error as e:
        raise PatternCompileError(
            f"Failed to compile pattern {source!r}: {e}",
            user_message=f"Query {query!r} could not be compiled: {e}",
            context=ErrorContext(operation="compile_pattern", query=query),
            recovery_actions=[RecoveryAction(description="Simplify the query text")],
            original_error=e,
        ) from e

    logger.debug(f"Compiled query {query!r} to pattern {source!r} (flags={flags})")
    return RegexMatcher(regex)
