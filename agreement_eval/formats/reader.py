"""
Reader for the flat dataset file format.

A dataset file is UTF-8 text whose first non-blank line is a marker such as
``# values``. Every following non-blank line is one record, split on
whitespace::

    # values
    dog 0.8
    cat 0.2
    bear -0.5
"""
import math
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Tuple, Union

from ..datasets import Partition, RankedList, Result, Shape, TiedRankedList, ValueList
from ..types.types import DatasetFormatError, DatasetReadError, InvalidDatasetError
from ..utils.error_handling import handle_errors
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

MARKER_PREFIX = "#"

# A record is its 1-based line number and its tokens
Record = Tuple[int, List[str]]


def tokenize(lines: Iterable[str]) -> Iterator[Record]:
    """Yield ``(line_number, tokens)`` for every non-blank line."""
    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if tokens:
            yield line_number, tokens


def read_marker(line: str) -> Shape:
    """Return the shape named by a marker line such as ``# tie-ranks``."""
    stripped = line.strip()
    if not stripped.startswith(MARKER_PREFIX):
        raise DatasetFormatError(
            "No marker found: the first line must start with '#'",
            context={"line_text": stripped[:80]},
        )
    marker = stripped[len(MARKER_PREFIX) :].strip()
    try:
        return Shape.from_marker(marker)
    except ValueError:
        raise DatasetFormatError(
            f"Not a valid marker: {marker!r}",
            context={"marker": marker, "valid": [shape.value for shape in Shape]},
        ) from None


def _check_unique(records: List[Record]) -> None:
    seen: Dict[str, int] = {}
    for line_number, tokens in records:
        for token in tokens:
            if token in seen:
                raise DatasetFormatError(
                    f"Duplicate element {token!r} (first seen on line {seen[token]})",
                    context={"line": line_number, "element": token},
                )
            seen[token] = line_number


def _parse_values(records: List[Record]) -> ValueList[str]:
    values: Dict[str, float] = {}
    for line_number, tokens in records:
        if len(tokens) != 2:
            raise DatasetFormatError(
                f"Each line of a value list must contain exactly 2 entries, received: {tokens}",
                context={"line": line_number},
            )
        element, text = tokens
        try:
            value = float(text)
        except ValueError:
            raise DatasetFormatError(
                f"Each line of a value list must have a number as the second entry, received: {tokens}",
                context={"line": line_number},
            ) from None
        if not math.isfinite(value):
            raise DatasetFormatError(
                f"Values must be finite, received: {tokens}", context={"line": line_number}
            )
        if element in values:
            raise DatasetFormatError(
                f"Each line of a value list must have a unique element as the first entry, received: {tokens}",
                context={"line": line_number, "element": element},
            )
        values[element] = value
    return ValueList.from_mapping(values)


def _parse_ranks(records: List[Record]) -> RankedList[str]:
    for line_number, tokens in records:
        if len(tokens) != 1:
            raise DatasetFormatError(
                f"Each line of a ranked list must contain exactly 1 entry, received: {tokens}",
                context={"line": line_number},
            )
    _check_unique(records)
    return RankedList.from_sequence(tokens[0] for _, tokens in records)


def _parse_tie_ranks(records: List[Record]) -> TiedRankedList[str]:
    _check_unique(records)
    return TiedRankedList.from_ranks(tokens for _, tokens in records)


def _parse_partition(records: List[Record]) -> Partition[str]:
    _check_unique(records)
    return Partition.from_groups(tokens for _, tokens in records)


_PARSERS: Dict[Shape, Callable[[List[Record]], object]] = {
    Shape.VALUES: _parse_values,
    Shape.RANKS: _parse_ranks,
    Shape.TIE_RANKS: _parse_tie_ranks,
    Shape.PARTITION: _parse_partition,
}


def parse_lines(lines: Iterable[str]) -> Result[str]:
    """
    Parse the lines of a dataset file into a :class:`Result`.

    Args:
        lines: Raw lines, with or without line terminators

    Returns:
        The parsed dataset

    Raises:
        DatasetFormatError: If the marker or any record is malformed
    """
    records = tokenize(lines)
    first = next(records, None)
    if first is None:
        raise DatasetFormatError("No marker found: the input is empty")
    marker_line, marker_tokens = first
    shape = read_marker(" ".join(marker_tokens))

    body = list(records)
    try:
        dataset = _PARSERS[shape](body)
    except DatasetFormatError:
        raise
    except InvalidDatasetError as e:
        raise DatasetFormatError(e.message, context=e.context, cause=e) from e

    logger.debug(
        "Parsed %s dataset with %d records (marker on line %d)",
        shape.value,
        len(body),
        marker_line,
    )
    return Result(dataset)


@handle_errors(error_type=DatasetReadError)
def read_result(path: Union[str, Path]) -> Result[str]:
    """
    Read a dataset file.

    Args:
        path: File to read, UTF-8 encoded

    Returns:
        The parsed dataset

    Raises:
        DatasetFormatError: If the file content is malformed; the path is added
            to the error context
        DatasetReadError: If the file cannot be opened or decoded
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            return parse_lines(f)
        except DatasetFormatError as e:
            e.context.setdefault("path", str(path))
            raise
