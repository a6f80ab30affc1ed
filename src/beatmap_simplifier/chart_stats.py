"""
Chart inspection helpers built on the `simfile` library.

Used for reporting only: the rewrite itself never goes through simfile, so
files simfile cannot parse are still processed.
"""

import logging
import re
from pathlib import Path
from typing import List, Sequence, Union

import simfile
from simfile.notes import NoteData, NoteType

logger = logging.getLogger(__name__)

COLUMN_LABELS = ["Left", "Down", "Up", "Right"]

# Note heads; tails, mines and fakes are not steps the player hits
COUNTED_TYPES = (NoteType.TAP, NoteType.HOLD_HEAD, NoteType.ROLL_HEAD)

# Only characters simfile's NoteType knows
NOTE_ROW_PATTERN = re.compile(r"[0-4MKLFA]{4,}")


def body_to_notedata(body: Sequence[str]) -> str:
    """
    Keep only note rows and measure commas from a chart body.

    Drops the radar-values line, comments, the closing ';' and empty measures
    so the result is plain note data simfile can iterate.
    """
    measures = []
    rows = []
    for line in body:
        row = "".join(line.split())
        if row == ",":
            if rows:
                measures.append(rows)
                rows = []
        elif NOTE_ROW_PATTERN.fullmatch(row):
            rows.append(row)
    if rows:
        measures.append(rows)

    return "\n,\n".join("\n".join(measure) for measure in measures)


def count_column_notes(body: Sequence[str]) -> List[int]:
    """Note heads per column (Left, Down, Up, Right, ...) in a chart body."""
    notedata = body_to_notedata(body)
    if not notedata:
        return [0] * len(COLUMN_LABELS)

    width = max(len(COLUMN_LABELS), len(notedata.split("\n", 1)[0]))
    counts = [0] * width
    try:
        for note in NoteData(notedata):
            if note.note_type in COUNTED_TYPES and note.column < width:
                counts[note.column] += 1
    except ValueError as e:
        logger.warning(f"⚠️  Could not count notes: {e}")
    return counts


def describe_counts(counts: Sequence[int]) -> str:
    labels = [
        COLUMN_LABELS[i] if i < len(COLUMN_LABELS) else f"Col {i}"
        for i in range(len(counts))
    ]
    return ", ".join(f"{label}: {count}" for label, count in zip(labels, counts))


def list_charts(file_path: Union[str, Path]) -> List[str]:
    """
    One 'stepstype difficulty (meter)' line per chart in the file.

    Returns an empty list if simfile cannot parse the file.
    """
    try:
        sim = simfile.open(str(file_path))
    except Exception as e:
        logger.warning(f"⚠️  Could not list charts in {Path(file_path).name}: {e}")
        return []

    return [f"{chart.stepstype} {chart.difficulty} ({chart.meter})" for chart in sim.charts]
