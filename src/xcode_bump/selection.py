"""Parsing of the operator's Info.plist selection.

Indices are zero-based everywhere: the candidate list is printed as
``[0] path``, ``[1] path``... and the same numbers are read back.
"""

from dataclasses import dataclass, field
from typing import Sequence, TextIO

from .exceptions import SelectionInputError


@dataclass
class Selection:
    """Result of parsing a comma separated index list.

    Attributes:
        indices: Valid indices, duplicates removed, input order kept.
        invalid: Tokens that are not integers or are out of range.
    """

    indices: list[int] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)

    def pick(self, candidates: Sequence[str]) -> list[str]:
        """Returns the selected candidates in selection order."""
        return [candidates[i] for i in self.indices]


def parse_selection(text: str, count: int) -> Selection:
    """Parses ``"0, 2,1"`` style input against ``count`` candidates.

    Whitespace around tokens and empty tokens are ignored, so blank input
    yields an empty selection.

    Args:
        text: One line of operator input.
        count: Number of candidates.

    Returns:
        Selection with valid indices and rejected tokens.

    Example:
        >>> parse_selection("1, 0, 1, 7, x", 2)
        Selection(indices=[1, 0], invalid=['7', 'x'])
    """
    selection = Selection()
    for raw in text.split(","):
        token = raw.strip()
        if not token:
            continue
        try:
            index = int(token)
        except ValueError:
            selection.invalid.append(token)
            continue
        if not 0 <= index < count:
            selection.invalid.append(token)
        elif index not in selection.indices:
            selection.indices.append(index)
    return selection


def format_candidates(candidates: Sequence[str]) -> list[str]:
    """Returns the ``[index] path`` lines shown to the operator."""
    return [f"[{index}] {path}" for index, path in enumerate(candidates)]


def read_selection_line(stream: TextIO) -> str:
    """Reads one line of operator input.

    Raises:
        SelectionInputError: If the stream is closed, unreadable or at EOF.
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise SelectionInputError(f"Failed to read the selection: {e}") from e
    if not line:
        raise SelectionInputError("No selection entered.")
    return line.rstrip("\r\n")
