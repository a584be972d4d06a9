"""
Shared pytest fixtures for agreement-eval tests.
"""
from pathlib import Path
from typing import Callable

import pytest

from agreement_eval.datasets import Partition, RankedList, Result, TiedRankedList, ValueList
from agreement_eval.utils import setup_logging

# Test data, written in the dataset file format
SAMPLE_FILES = {
    "truth-ranks.txt": "# ranks\ndog\nbear\ncat\n",
    "reversed-ranks.txt": "# ranks\ncat\nbear\ndog\n",
    "values-a.txt": "# values\ncat 1\ndog 2\nbear 3\n",
    "values-b.txt": "# values\ncat 2\ndog 4\nbear 6\n",
    "tied.txt": "# tie-ranks\ndog bear\ncat\n",
    "partition-a.txt": "# partition\ndog bear\ncat\n",
    "partition-split.txt": "# partition\ndog\nbear\ncat\n",
}


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing ``content`` to ``tmp_path / name`` and returning the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_files(write_dataset) -> dict:
    """All sample datasets written to disk, by file name."""
    return {name: write_dataset(name, content) for name, content in SAMPLE_FILES.items()}


@pytest.fixture
def animal_ranks() -> Result:
    return Result(RankedList.from_sequence(["dog", "bear", "cat"]))


@pytest.fixture
def animal_values() -> Result:
    return Result(ValueList.from_mapping({"cat": 1.0, "dog": 2.0, "bear": 3.0}))


@pytest.fixture
def animal_tied() -> Result:
    return Result(TiedRankedList.from_ranks([["dog", "bear"], ["cat"]]))


@pytest.fixture
def animal_partition() -> Result:
    return Result(Partition.from_groups([["dog", "bear"], ["cat"]]))


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind the package handlers after tests that swap ``sys.stderr``."""
    yield
    setup_logging()
