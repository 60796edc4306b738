"""Fixtures for search service tests.

All fixtures create REAL files in temp directories. No mocks.
"""

import pytest
from pathlib import Path


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """A single text file with two hits separated by unrelated lines."""
    path = tmp_path / "poem.txt"
    path.write_text(
        "I'm nobody! Who are you?\n"
        "Are you nobody, too?\n"
        "Then there's a pair of us - don't tell!\n"
        "They'd banish us, you know.\n"
        "\n"
        "How dreary to be somebody!\n"
        "How public, like a frog\n"
        "To tell your name the livelong day\n"
        "To an admiring bog!\n"
    )
    return path


@pytest.fixture
def search_tree(tmp_path: Path) -> Path:
    """A small directory tree with hits in several files.

    Layout (sorted traversal order):
        tree/a.txt        MATCH on line 2
        tree/b.txt        no hits
        tree/sub/c.txt    MATCH on lines 1 and 4
    """
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha\nMATCH one\nomega\n")
    (root / "b.txt").write_text("nothing here\n")
    (root / "sub" / "c.txt").write_text("MATCH two\nx\ny\nMATCH three\n")
    return root
