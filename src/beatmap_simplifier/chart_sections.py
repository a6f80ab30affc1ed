"""
Splits a .sm file into sections.

A section starts at a '#NOTES:' line or at a '//' comment naming
dance-single (the '//---------------dance-single - ----' banner written
above each chart). Everything up to the next start line belongs to it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

NOTES_MARKER = "#NOTES:"
COMMENT_MARKER = "//"
STYLE_TAG = "dance-single"


class SectionKind(str, Enum):
    NOTES = "notes"
    DANCE_SINGLE = "dance-single"
    UNKNOWN = "unknown"


@dataclass
class Section:
    kind: SectionKind
    lines: List[str] = field(default_factory=list)
    start_offset: int = 0


def is_section_start(line: str) -> bool:
    trimmed = line.strip()
    return trimmed.startswith(NOTES_MARKER) or (
        trimmed.startswith(COMMENT_MARKER) and STYLE_TAG in trimmed
    )


def get_section_kind(line: str) -> SectionKind:
    trimmed = line.strip()
    if trimmed.startswith(NOTES_MARKER):
        return SectionKind.NOTES
    if STYLE_TAG in trimmed:
        return SectionKind.DANCE_SINGLE
    return SectionKind.UNKNOWN


def parse_sections(lines: Sequence[str]) -> List[Section]:
    """
    Group file lines into sections in one pass.

    The start line is the first line of the section it opens. Lines before
    the first start line are not part of any section.
    """
    sections = []
    current = None

    for i, line in enumerate(lines):
        if is_section_start(line):
            if current is not None:
                sections.append(current)
            current = Section(kind=get_section_kind(line), lines=[line], start_offset=i)
        elif current is not None:
            current.lines.append(line)

    if current is not None:
        sections.append(current)

    return sections
