"""Search service driving the engine over files and directory trees.

The service owns the I/O policy: a read failure is fatal when searching a
single file and is skipped when walking a tree. One matcher and one
TraversalContext are shared by every file of a run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from rgrep.interfaces.search import OutputRecord, SearchConfig, TraversalContext
from rgrep.patterns.matcher import Matcher
from rgrep.patterns.regex_matcher import compile_pattern
from rgrep.types.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    RecoveryAction,
    ResourceError,
)

from .engine import ContextSearchEngine
from .sources import PathLike, load_document, walk_files


def read_error_code(error: OSError) -> ErrorCode:
    """Classify a failed read."""
    if isinstance(error, FileNotFoundError):
        return ErrorCode.FILE_NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorCode.PERMISSION_DENIED
    return ErrorCode.FILE_READ_FAILED


class SearchService:
    """Run a search over one file or every file under a directory.

    Usage:
        service = SearchService.create("MATCH", config=SearchConfig(line_number=True))

        # Single file: read errors raise ResourceError
        records = service.search_file("notes.txt")

        # Directory tree: unreadable files are skipped
        for record in service.search_tree("src/"):
            ...
    """

    def __init__(self, matcher: Matcher, config: SearchConfig):
        """Initialize search service.

        Args:
            matcher: Compiled line matcher shared by every file.
            config: Selection and output options.
        """
        self._engine = ContextSearchEngine(matcher, config)

    @classmethod
    def create(
        cls,
        query: str,
        ignore_case: bool = False,
        word_regexp: bool = False,
        line_regexp: bool = False,
        config: Optional[SearchConfig] = None,
    ) -> "SearchService":
        """Compile a query and build a service around it.

        Args:
            query: Literal query text.
            ignore_case: Match without regard to case.
            word_regexp: Only match whole words.
            line_regexp: Only match whole lines.
            config: Selection and output options (defaults if omitted).

        Returns:
            Configured SearchService.
        """
        matcher = compile_pattern(
            query,
            ignore_case=ignore_case,
            word_regexp=word_regexp,
            line_regexp=line_regexp,
        )
        return cls(matcher, config or SearchConfig())

    @property
    def engine(self) -> ContextSearchEngine:
        return self._engine

    def search_file(
        self,
        path: PathLike,
        display_path: Optional[str] = None,
        carry: Optional[TraversalContext] = None,
    ) -> list[OutputRecord]:
        """Search one file.

        Args:
            path: File to read.
            display_path: Path shown in output, None for single-file mode.
            carry: Separator state shared with previously searched files.

        Returns:
            Records for this file.

        Raises:
            ResourceError: If the file cannot be read.
        """
        try:
            lines = load_document(path)
        except OSError as e:
            raise ResourceError(
                f"Failed to read {path}: {e}",
                user_message=f"{path}: {e.strerror or e}",
                code=read_error_code(e),
                context=ErrorContext(operation="search_file", file_path=str(path)),
                original_error=e,
            ) from e

        return self._engine.search(lines, file_path=display_path, carry=carry)

    def search_tree(
        self,
        root: PathLike,
        carry: Optional[TraversalContext] = None,
    ) -> Iterator[OutputRecord]:
        """Search every file under a directory, in traversal order.

        Files are read and searched one at a time; records for a file are
        yielded before the next file is opened.

        Args:
            root: Directory to traverse.
            carry: Separator state; a fresh context is used when omitted.

        Yields:
            Records tagged with each file's display path.
        """
        if carry is None:
            carry = TraversalContext()

        for file_path in walk_files(root):
            try:
                records = self.search_file(file_path, display_path=str(file_path), carry=carry)
            except ResourceError as e:
                logger.debug(f"Skipping file {file_path}: {e}")
                continue

            yield from records

    def search_path(
        self,
        path: PathLike,
        recursive: bool = False,
    ) -> Iterator[OutputRecord]:
        """Search a file, or a directory tree when ``recursive`` is set.

        Raises:
            ConfigurationError: If ``path`` is a directory and ``recursive`` is off.
            ResourceError: If ``path`` does not exist or a single file cannot be read.
        """
        target = Path(path)

        if target.is_dir():
            if not recursive:
                raise ConfigurationError(
                    f"{path} is a directory",
                    user_message=f"{path}: Is a directory",
                    context=ErrorContext(operation="search_path", file_path=str(path)),
                    recovery_actions=[RecoveryAction(description="Search the whole tree", command="rgrep -r QUERY PATH")],
                )
            logger.debug(f"Searching directory tree {path}")
            yield from self.search_tree(target)
            return

        if not target.exists():
            raise ResourceError(
                f"{path} does not exist",
                user_message=f"{path}: No such file or directory",
                code=ErrorCode.FILE_NOT_FOUND,
                context=ErrorContext(operation="search_path", file_path=str(path)),
            )

        yield from self.search_file(target)
