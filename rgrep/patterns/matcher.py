"""Line matcher base class and the Span result type.

The search engine only needs two things from a matcher: a verdict for a
line, and the positions of every match in that line for highlighting.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open character range of one match within a line."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    def __len__(self) -> int:
        return self.end - self.start


class Matcher(ABC):
    """Abstract base class for line matchers.

    Implementations must provide:
    - test(): Whether a line matches
    - find_spans(): Every non-overlapping match in a line, left to right
    """

    @abstractmethod
    def test(self, line: str) -> bool:
        """Check whether a line matches.

        Args:
            line: One line of text, without its line terminator.

        Returns:
            True if the line contains a match.
        """
        pass

    @abstractmethod
    def find_spans(self, line: str) -> list[Span]:
        """Locate all non-overlapping matches in a line.

        Args:
            line: One line of text, without its line terminator.

        Returns:
            Non-empty spans ordered by start offset, offsets taken
            against the original line.
        """
        pass
