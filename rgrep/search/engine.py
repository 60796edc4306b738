"""Context-aware line selection.

The engine walks one document in order and decides, per line, whether it
is a direct hit, a context line, or skipped. It merges overlapping context
windows into a single block and inserts a group separator between blocks
that are not adjacent. It never raises and never touches the filesystem.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rgrep.interfaces.search import (
    CountRecord,
    LineRecord,
    OutputRecord,
    SearchConfig,
    SeparatorRecord,
    TraversalContext,
)
from rgrep.patterns.matcher import Matcher


class ContextSearchEngine:
    """Select hits and their context from a document.

    One engine can be reused for any number of documents. Per-document
    positions live inside ``search``; the only state shared between calls
    is the TraversalContext the caller passes in.

    Usage:
        engine = ContextSearchEngine(compile_pattern("MATCH"), SearchConfig(after_context=1))
        carry = TraversalContext()
        for path, lines in documents:
            records = engine.search(lines, file_path=path, carry=carry)
    """

    def __init__(self, matcher: Matcher, config: SearchConfig):
        """Initialize the engine.

        Args:
            matcher: Compiled line matcher.
            config: Selection and output options.
        """
        self._matcher = matcher
        self._config = config

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    @property
    def config(self) -> SearchConfig:
        return self._config

    def is_hit(self, line: str) -> bool:
        """Check whether a line is a direct hit once inversion is applied."""
        return self._matcher.test(line) != self._config.invert_match

    def count_hits(self, lines: Sequence[str]) -> int:
        """Count the direct hits in a document."""
        return sum(1 for line in lines if self.is_hit(line))

    def search(
        self,
        lines: Sequence[str],
        file_path: Optional[str] = None,
        carry: Optional[TraversalContext] = None,
    ) -> list[OutputRecord]:
        """Select the output records for one document.

        Args:
            lines: The document, one entry per line.
            file_path: Display path in multi-file mode, None otherwise.
            carry: Separator state shared with previous documents. A fresh
                context is used when omitted.

        Returns:
            Records in document order. In count mode, a single CountRecord.
        """
        if carry is None:
            carry = TraversalContext()

        if self._config.count:
            return [CountRecord(count=self.count_hits(lines), file_path=file_path)]

        return self._select(lines, file_path, carry)

    def _select(
        self,
        lines: Sequence[str],
        file_path: Optional[str],
        carry: TraversalContext,
    ) -> list[OutputRecord]:
        config = self._config
        records: list[OutputRecord] = []

        last_hit = -1
        last_printed = -1
        pending_after = 0

        for i, line in enumerate(lines):
            if self.is_hit(line):
                if pending_after == 0:
                    # Trailing context of the previous hit owns everything up to
                    # last_hit + after_context; nothing is printed twice.
                    start = max(
                        0,
                        i - config.before_context,
                        last_hit + config.after_context,
                        last_printed + 1,
                    )
                    adjacent = last_printed >= 0 and start <= last_printed + 1

                    if (
                        carry.needs_separator
                        and not adjacent
                        and config.context_enabled
                        and config.group_separator
                    ):
                        records.append(SeparatorRecord(text=config.group_separator, file_path=file_path))

                    for j in range(start, i):
                        records.append(self._line_record(lines[j], j, file_path, hit=False))

                records.append(self._line_record(line, i, file_path, hit=True))
                last_hit = i
                last_printed = i
                pending_after = config.after_context
                carry.needs_separator = True

            elif pending_after > 0:
                records.append(self._line_record(line, i, file_path, hit=False))
                last_printed = i
                pending_after -= 1

        return records

    def _line_record(self, line: str, index: int, file_path: Optional[str], hit: bool) -> LineRecord:
        """Build the record for one emitted line.

        Context lines are never highlighted, even when they contain a match.
        """
        spans = tuple(self._matcher.find_spans(line)) if hit and self._config.color else ()
        return LineRecord(
            text=line,
            line_number=index + 1 if self._config.line_number else None,
            file_path=file_path,
            spans=spans,
            is_context=not hit,
        )


def search(
    lines: Sequence[str],
    matcher: Matcher,
    config: SearchConfig,
    file_path: Optional[str] = None,
    carry: Optional[TraversalContext] = None,
) -> list[OutputRecord]:
    """Run a one-off ContextSearchEngine over a document.

    Args:
        lines: The document, one entry per line.
        matcher: Compiled line matcher.
        config: Selection and output options.
        file_path: Display path in multi-file mode, None otherwise.
        carry: Separator state shared with previous documents.

    Returns:
        Records in document order.
    """
    return ContextSearchEngine(matcher, config).search(lines, file_path=file_path, carry=carry)
