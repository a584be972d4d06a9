"""
Writer for the flat dataset file format.

Output is deterministic: partition groups and tied ranks list their elements
in sorted string order, and partition groups are themselves sorted.
"""
from pathlib import Path
from typing import Iterable, List, Union

from ..datasets import Result, Shape
from .reader import MARKER_PREFIX


def _sorted_tokens(group: Iterable[object]) -> str:
    return " ".join(sorted(str(element) for element in group))


def format_lines(result: Result) -> List[str]:
    """Return the lines of ``result`` in file format, marker first."""
    lines = [f"{MARKER_PREFIX} {result.shape.value}"]
    if result.shape is Shape.VALUES:
        lines.extend(f"{element} {value!r}" for element, value in result.value_list.items())
    elif result.shape is Shape.RANKS:
        lines.extend(str(element) for element in result.ranked_list)
    elif result.shape is Shape.TIE_RANKS:
        lines.extend(_sorted_tokens(rank) for rank in result.tied_ranked_list)
    else:
        lines.extend(sorted(_sorted_tokens(group) for group in result.partition))
    return lines


def format_result(result: Result) -> str:
    """Serialize ``result`` to the text accepted by :func:`parse_lines`."""
    return "\n".join(format_lines(result)) + "\n"


def write_result(result: Result, path: Union[str, Path]) -> Path:
    """Write ``result`` to ``path`` as UTF-8 and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_result(result))
    return path
