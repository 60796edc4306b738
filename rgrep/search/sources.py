"""File reading and directory traversal.

Thin wrappers over the filesystem. Errors from reading a single file are
left to the caller, which decides whether they are fatal.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Union

from loguru import logger

PathLike = Union[str, os.PathLike]


def read_text(path: PathLike) -> str:
    """Read a file's full text.

    Undecodable bytes are replaced rather than raising, so a stray
    non-UTF-8 byte does not hide the rest of the file. Line endings are
    returned untranslated; ``split_lines`` decides what ends a line.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def split_lines(text: str) -> list[str]:
    """Split text into lines without their terminators.

    Only ``\\n`` and ``\\r\\n`` end a line; form feeds and Unicode line
    separators stay part of the line. A final terminator does not start an
    extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_document(path: PathLike) -> list[str]:
    """Read a file and split it into lines.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return split_lines(read_text(path))


def walk_files(root: PathLike) -> Iterator[Path]:
    """Lazily yield every regular file under a directory.

    Subdirectories and files are visited in sorted order. Directories that
    cannot be listed are logged and skipped.

    Args:
        root: Directory to traverse.

    Yields:
        Paths joined onto ``root`` as given.
    """

    def _on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.is_file():
                yield path
