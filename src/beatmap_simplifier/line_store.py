"""
In-memory view of a chart file as a list of lines.

The file text is split on '\\n' only, so a trailing '\\r' stays part of its
line and joining the lines back gives the original text.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass(frozen=True)
class SplicePosition:
    found: bool
    index: int = -1
    length: int = 0


class LineStore:
    """Ordered lines of one chart file, edited in place by splicing."""

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)

    @classmethod
    def from_text(cls, content: str) -> "LineStore":
        return cls(content.split("\n"))

    def to_text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def find_position(self, needle: Sequence[str]) -> SplicePosition:
        """
        Find the first exact, contiguous occurrence of `needle`.

        Lines are compared as-is (no stripping). An empty needle matches at 0.

        Returns:
            SplicePosition with the start index and the needle length,
            or found=False with index -1 when there is no match.
        """
        size = len(needle)
        for i in range(len(self.lines) - size + 1):
            if all(self.lines[i + j] == needle[j] for j in range(size)):
                return SplicePosition(found=True, index=i, length=size)

        return SplicePosition(found=False)

    def find_line(self, marker: str) -> int:
        """Index of the first line whose stripped text equals `marker`, or -1."""
        for i, line in enumerate(self.lines):
            if line.strip() == marker:
                return i
        return -1

    def splice(self, index: int, length: int, replacement: Sequence[str]) -> None:
        """Remove `length` lines at `index` and put `replacement` in their place."""
        if index < 0 or index > len(self.lines):
            raise IndexError(f"Splice index {index} outside 0..{len(self.lines)}")
        self.lines[index:index + length] = list(replacement)
