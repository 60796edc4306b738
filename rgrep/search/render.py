"""Rendering of output records into text lines.

The Renderer applies the line layout ``[path:][line:]content``; all styling
goes through a Formatter so the layout can be tested without a terminal.
"""

from __future__ import annotations

import click

from rgrep.constants import (
    FIELD_DELIMITER,
    FILE_PATH_STYLE,
    LINE_NUMBER_STYLE,
    MATCH_STYLE,
    SEPARATOR_STYLE,
)
from rgrep.interfaces.search import (
    CountRecord,
    Formatter,
    LineRecord,
    OutputRecord,
    SearchConfig,
    SeparatorRecord,
)
from rgrep.patterns.matcher import Span


class PlainFormatter:
    """Formatter that leaves all text unstyled."""

    def match(self, text: str) -> str:
        return text

    def file_path(self, text: str) -> str:
        return text

    def line_number(self, text: str) -> str:
        return text

    def separator(self, text: str) -> str:
        return text

    def delimiter(self, text: str) -> str:
        return text


class StyledFormatter:
    """Formatter emitting ANSI styles through click.style."""

    def match(self, text: str) -> str:
        return click.style(text, **MATCH_STYLE)

    def file_path(self, text: str) -> str:
        return click.style(text, **FILE_PATH_STYLE)

    def line_number(self, text: str) -> str:
        return click.style(text, **LINE_NUMBER_STYLE)

    def separator(self, text: str) -> str:
        return click.style(text, **SEPARATOR_STYLE)

    def delimiter(self, text: str) -> str:
        return click.style(text, **SEPARATOR_STYLE)


def highlight(text: str, spans: tuple[Span, ...] | list[Span], formatter: Formatter) -> str:
    """Wrap every span of ``text`` with the formatter's match style.

    Spans are offsets into the original text; pieces are assembled left to
    right so inserted styling never shifts later spans.
    """
    if not spans:
        return text

    pieces = []
    cursor = 0
    for span in spans:
        pieces.append(text[cursor:span.start])
        pieces.append(formatter.match(text[span.start:span.end]))
        cursor = span.end
    pieces.append(text[cursor:])
    return "".join(pieces)


class Renderer:
    """Turn output records into printable lines.

    Usage:
        renderer = Renderer.for_config(config)
        for record in records:
            click.echo(renderer.render(record))
    """

    def __init__(self, formatter: Formatter | None = None):
        """Initialize renderer.

        Args:
            formatter: Styling capability, PlainFormatter when omitted.
        """
        self._formatter = formatter or PlainFormatter()

    @classmethod
    def for_config(cls, config: SearchConfig) -> "Renderer":
        """Create a renderer styled according to ``config.color``."""
        return cls(StyledFormatter() if config.color else PlainFormatter())

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def render(self, record: OutputRecord) -> str:
        """Render one record as a single line of text (no trailing newline)."""
        if isinstance(record, SeparatorRecord):
            return self._formatter.separator(record.text)
        if isinstance(record, CountRecord):
            return self._prefix(record.file_path, None) + str(record.count)
        if isinstance(record, LineRecord):
            content = highlight(record.text, record.spans, self._formatter)
            return self._prefix(record.file_path, record.line_number) + content
        raise TypeError(f"Unknown output record: {record!r}")

    def render_all(self, records) -> list[str]:
        return [self.render(record) for record in records]

    def _prefix(self, file_path: str | None, line_number: int | None) -> str:
        parts = []
        delimiter = self._formatter.delimiter(FIELD_DELIMITER)
        if file_path:
            parts.append(self._formatter.file_path(file_path) + delimiter)
        if line_number is not None:
            parts.append(self._formatter.line_number(str(line_number)) + delimiter)
        return "".join(parts)
