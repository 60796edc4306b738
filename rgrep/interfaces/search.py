"""Search interfaces shared by the engine, service, renderer and CLI.

The engine consumes a SearchConfig and a TraversalContext and produces
output records. Records are plain data: presentation is applied later by a
Renderer through the Formatter protocol.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol, Union

from rgrep.constants import DEFAULT_GROUP_SEPARATOR
from rgrep.patterns.matcher import Span
from rgrep.types.errors import ConfigurationError, ErrorContext


@dataclass(frozen=True)
class SearchConfig:
    """Output and selection options, independent of the matcher."""

    invert_match: bool = False
    count: bool = False
    line_number: bool = False
    color: bool = False
    after_context: int = 0
    before_context: int = 0
    group_separator: str = DEFAULT_GROUP_SEPARATOR

    def __post_init__(self) -> None:
        for name in ("after_context", "before_context"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(
                    f"{name} must be non-negative, got {value}",
                    context=ErrorContext(operation="SearchConfig", additional_info={name: value}),
                )

    @property
    def context_enabled(self) -> bool:
        """True when any context lines are requested."""
        return self.after_context > 0 or self.before_context > 0


@dataclass
class TraversalContext:
    """State carried between engine invocations across files.

    Only ``needs_separator`` survives from one file to the next; the
    engine keeps its per-file positions to itself.
    """

    needs_separator: bool = False


@dataclass(frozen=True)
class LineRecord:
    """One selected line, either a direct hit or a context line."""

    text: str
    line_number: Optional[int] = None  # 1-indexed, None when numbering is off
    file_path: Optional[str] = None  # None in single-file mode
    spans: tuple[Span, ...] = field(default_factory=tuple)
    is_context: bool = False


@dataclass(frozen=True)
class SeparatorRecord:
    """Marker between two non-adjacent blocks."""

    text: str = DEFAULT_GROUP_SEPARATOR
    file_path: Optional[str] = None


@dataclass(frozen=True)
class CountRecord:
    """Number of selected lines in one document (count mode)."""

    count: int
    file_path: Optional[str] = None


OutputRecord = Union[LineRecord, SeparatorRecord, CountRecord]


class Formatter(Protocol):
    """Styling capability used by the Renderer.

    Each method receives plain text and returns it ready for output.
    """

    def match(self, text: str) -> str:
        ...

    def file_path(self, text: str) -> str:
        ...

    def line_number(self, text: str) -> str:
        ...

    def separator(self, text: str) -> str:
        ...

    def delimiter(self, text: str) -> str:
        ...
