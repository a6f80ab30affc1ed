"""
Finds one chart's step data inside a '#NOTES:' section.

A .sm chart header looks like:

    #NOTES:
         dance-single:
         :
         Beginner:
         2:
         0.100,0.100,0.000,0.000,0.000:
    1000
    ...
    ;

The chart is picked by its (style, difficulty, steps) marker lines. The body
is everything after the difficulty line up to the next difficulty name or
the end of the section, minus the steps line.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .chart_sections import Section, SectionKind, STYLE_TAG

STYLE_MARKER = f"{STYLE_TAG}:"

# A body scan ends at the first of these.
DIFFICULTY_BOUNDARIES = (
    "Easy:",
    "Medium:",
    "Hard:",
    "Challenge:",
    "Expert:",
    "Master:",
)


def parse_section_pair(pair: str) -> Tuple[str, str]:
    """
    Split 'Beginner:2' into ('Beginner', '2').

    Raises:
        ValueError: If either half is missing
    """
    if pair is None or not pair.strip():
        raise ValueError("Section is empty, expected 'Difficulty:steps' (e.g. 'Beginner:2')")

    difficulty, sep, steps = pair.strip().partition(":")
    difficulty, steps = difficulty.strip(), steps.strip()
    if not sep or not difficulty or not steps or ":" in steps:
        raise ValueError(f"Invalid section {pair!r}, expected 'Difficulty:steps' (e.g. 'Beginner:2')")

    return difficulty, steps


class ChartSelector(BaseModel):
    """Marker lines identifying one chart, e.g. dance-single: / Beginner: / 2:."""

    model_config = ConfigDict(frozen=True)

    style: str = Field(STYLE_MARKER, description="Style marker line, e.g. 'dance-single:'")
    difficulty: str = Field(..., description="Difficulty marker line, e.g. 'Beginner:'")
    steps: str = Field(..., description="Step-count (meter) marker line, e.g. '2:'")

    @classmethod
    def from_pair(cls, pair: str, style: str = STYLE_MARKER) -> "ChartSelector":
        """Build a selector from a 'Difficulty:steps' pair such as 'Beginner:2'."""
        difficulty, steps = parse_section_pair(pair)
        return cls(style=style, difficulty=f"{difficulty}:", steps=f"{steps}:")


class ParserState(Enum):
    SCANNING = "scanning"
    IN_STYLE = "in_style"
    IN_TARGET_DIFFICULTY = "in_target_difficulty"


class LineAction(Enum):
    SKIP = "skip"
    COLLECT = "collect"
    RESTART = "restart"  # target difficulty line: start a fresh body
    STOP = "stop"


@dataclass
class ExtractResult:
    found: bool
    content: List[str] = field(default_factory=list)


def is_next_difficulty_level(trimmed: str) -> bool:
    return trimmed in DIFFICULTY_BOUNDARIES


def advance(state: ParserState, trimmed: str, selector: ChartSelector) -> Tuple[ParserState, LineAction]:
    """
    One step of the locator state machine.

    Args:
        state: Current parser state
        trimmed: The line with surrounding whitespace removed
        selector: Chart being looked for

    Returns:
        (next state, what to do with the line)
    """
    if trimmed == selector.style:
        if state is ParserState.SCANNING:
            return ParserState.IN_STYLE, LineAction.SKIP
        return state, LineAction.SKIP

    if state is ParserState.SCANNING:
        return state, LineAction.SKIP

    if trimmed == selector.difficulty:
        return ParserState.IN_TARGET_DIFFICULTY, LineAction.RESTART

    if state is ParserState.IN_STYLE:
        return state, LineAction.SKIP

    if is_next_difficulty_level(trimmed):
        return ParserState.SCANNING, LineAction.STOP

    if trimmed == selector.steps:
        return state, LineAction.SKIP

    return state, LineAction.COLLECT


def extract_target_from_section(section: Section, selector: ChartSelector) -> ExtractResult:
    """
    Pull the selected chart's body out of a notes section.

    Collected lines keep their original text (indentation, trailing '\\r').
    Sections that are not notes sections never match.
    """
    if section.kind is not SectionKind.NOTES:
        return ExtractResult(found=False)

    state = ParserState.SCANNING
    found = False
    content: List[str] = []

    for line in section.lines:
        state, action = advance(state, line.strip(), selector)

        if action is LineAction.STOP:
            break
        if action is LineAction.RESTART:
            found = True
            content = []
        elif action is LineAction.COLLECT:
            content.append(line)

    return ExtractResult(found=found, content=content)
