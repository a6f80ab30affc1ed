"""
Thins out step data by blanking every other note row.

Rows are 4-character strings, one character per column (Left, Down, Up, Right):
    0 = no note, 1 = tap, 2 = hold start, 3 = hold end
"""

import re
from typing import List, Optional, Sequence

EMPTY_ROW = "0000"
HOLD_END = "3"
SEPARATORS = ("", ",", ";")

STEP_ROW_PATTERN = re.compile(r"[012\s]+")


def is_step_data_line(trimmed: str) -> bool:
    """True for rows made only of 0, 1, 2 and whitespace."""
    return STEP_ROW_PATTERN.fullmatch(trimmed) is not None


def simplify_steps(lines: Sequence[str]) -> List[str]:
    """
    Replace every other step row with '0000'.

    A step row becomes '0000' unless the last emitted row was already '0000',
    in which case it is kept, so two generated '0000' rows never follow each
    other (the engine would read that as a double tap).

    Measure separators (',', ';', blank) and non-step lines are passed through
    and do not reset that check. Rows containing a hold end are kept byte-exact.

    Returns:
        A list of the same length as `lines`
    """
    processed = []
    previous: Optional[str] = None

    for line in lines:
        trimmed = line.strip()

        if trimmed in SEPARATORS:
            processed.append(line)
            continue

        if HOLD_END in trimmed or not is_step_data_line(trimmed):
            processed.append(line)
            continue

        if previous != EMPTY_ROW:
            processed.append(EMPTY_ROW)
            previous = EMPTY_ROW
        else:
            processed.append(line)
            previous = trimmed

    return processed
