"""
Writes a simplified chart back into the file lines.

Two ways:
- replace: splice the simplified body over the original body
- insert: add a whole new chart block next to the '#ATTACKS:;' line
"""

import logging
from enum import Enum
from typing import List, Sequence

from .chart_locator import ChartSelector
from .chart_sections import COMMENT_MARKER
from .line_store import LineStore

logger = logging.getLogger(__name__)

ATTACKS_MARKER = "#ATTACKS:;"


class InsertSide(str, Enum):
    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def from_action(cls, action: str) -> "InsertSide":
        """'Insert Before' -> BEFORE, anything else -> AFTER."""
        return cls.BEFORE if "before" in action.lower() else cls.AFTER


def find_attacks_position(store: LineStore, side: InsertSide = InsertSide.AFTER) -> int:
    """Insert index next to the '#ATTACKS:;' line, or -1 if the file has none."""
    anchor = store.find_line(ATTACKS_MARKER)
    if anchor < 0:
        return -1
    return anchor if side is InsertSide.BEFORE else anchor + 1


def build_chart_block(selector: ChartSelector, processed: Sequence[str]) -> List[str]:
    return [
        "",
        COMMENT_MARKER,
        selector.style,
        "",
        selector.difficulty,
        selector.steps,
        *processed,
        ";",
    ]


def replace_target_content(store: LineStore, original: Sequence[str], processed: Sequence[str]) -> bool:
    """
    Swap the first exact occurrence of `original` for `processed`.

    Returns:
        False (and leaves the lines alone) if `original` is not in the file
    """
    position = store.find_position(original)
    if not position.found:
        logger.warning("⚠️  Could not find original target content to replace")
        return False

    store.splice(position.index, position.length, processed)
    logger.debug(f"Replaced {position.length} lines at line {position.index + 1}")
    return True


def insert_target_content(
    store: LineStore,
    processed: Sequence[str],
    new_selector: ChartSelector,
    side: InsertSide = InsertSide.AFTER,
) -> bool:
    """
    Insert `processed` as a new chart labelled by `new_selector`.

    Returns:
        False (and leaves the lines alone) if there is no '#ATTACKS:;' line
    """
    index = find_attacks_position(store, side)
    if index < 0:
        logger.warning(f"⚠️  Could not find {ATTACKS_MARKER} to insert new content")
        return False

    block = build_chart_block(new_selector, processed)
    store.splice(index, 0, block)
    logger.debug(f"Inserted {len(block)} lines {side.value} {ATTACKS_MARKER}")
    return True
