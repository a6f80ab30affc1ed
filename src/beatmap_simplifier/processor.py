"""
Simplify pipeline for .sm files.

Per file: read the whole text, find the selected chart in every '#NOTES:'
section, simplify its step rows, replace the body or insert a new chart,
and write the text back once. Each file is handled on its own: an error in
one file is logged and the batch moves on.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from .chart_locator import ExtractResult, extract_target_from_section
from .chart_sections import SectionKind, parse_sections
from .chart_stats import count_column_notes, describe_counts, list_charts
from .chart_writer import insert_target_content, replace_target_content
from .config import ProcessOptions
from .files import create_backup, find_chart_files, read_chart, write_chart
from .line_store import LineStore
from .step_simplifier import simplify_steps

logger = logging.getLogger(__name__)


class RunMode(str, Enum):
    EXTRACT = "extract"
    PROCESS = "process"


class Outcome(str, Enum):
    FOUND = "found"            # extract mode
    REPLACED = "replaced"
    INSERTED = "inserted"
    NOT_FOUND = "not_found"    # target chart not in the file
    EMPTY = "empty"            # target chart found but has no step data
    UNMATCHED = "unmatched"    # original body no longer present verbatim
    NO_ANCHOR = "no_anchor"    # no '#ATTACKS:;' line to insert next to


@dataclass
class FileReport:
    path: Path
    outcomes: List[Outcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def changed(self) -> bool:
        return any(o in (Outcome.REPLACED, Outcome.INSERTED) for o in self.outcomes)


class ChartSimplifier:
    """
    Runs extraction and simplification with a fixed set of options.
    """

    def __init__(self, options: ProcessOptions):
        self.options = options

    def extract(self, store: LineStore) -> List[ExtractResult]:
        """Bodies of the selected chart, one per notes section that has it."""
        selector = self.options.selector
        results = []
        for section in parse_sections(store.lines):
            if section.kind is not SectionKind.NOTES:
                continue
            result = extract_target_from_section(section, selector)
            if result.found:
                results.append(result)
        return results

    def apply(self, store: LineStore) -> List[Outcome]:
        """
        Simplify the selected chart inside `store`.

        Sections are read from the lines as they were before any edit; each
        replace looks the original body up again in the current lines.
        """
        options = self.options
        outcomes = []

        for result in self.extract(store):
            if not result.content:
                logger.info(f"  {self.options.section_to_extract} chart found but empty, skipping")
                outcomes.append(Outcome.EMPTY)
                continue

            processed = simplify_steps(result.content)
            logger.info(f"  Notes before: {describe_counts(count_column_notes(result.content))}")
            logger.info(f"  Notes after:  {describe_counts(count_column_notes(processed))}")

            if options.is_replace:
                ok = replace_target_content(store, result.content, processed)
                outcomes.append(Outcome.REPLACED if ok else Outcome.UNMATCHED)
            else:
                ok = insert_target_content(store, processed, options.new_selector, options.insert_side)
                outcomes.append(Outcome.INSERTED if ok else Outcome.NO_ANCHOR)

        if not outcomes:
            outcomes.append(Outcome.NOT_FOUND)
        return outcomes

    def process_file(self, file_path: Union[str, Path], backup: bool = True) -> FileReport:
        """Back up (optionally) and simplify one chart file."""
        path = Path(file_path)
        report = FileReport(path=path)
        mode = "replacing" if self.options.is_replace else "inserting"
        logger.info(f"Processing and {mode} {self.options.selector.difficulty} content in: {path}")

        try:
            if backup:
                create_backup(path)

            content = read_chart(path)
            store = LineStore.from_text(content)
            report.outcomes = self.apply(store)

            new_content = store.to_text()
            if new_content != content:
                write_chart(path, new_content)

        except Exception as e:
            logger.error(f"❌ Error processing {path}: {e}")
            report.error = str(e)
            return report

        if report.changed:
            logger.info(f"✓ Successfully processed: {path.name}")
        elif Outcome.NOT_FOUND in report.outcomes:
            logger.info(f"No {self.options.section_to_extract} chart found in: {path.name}")
        elif Outcome.EMPTY in report.outcomes:
            logger.info(f"{self.options.section_to_extract} chart in {path.name} has no step data, nothing to do")
        return report

    def extract_file(self, file_path: Union[str, Path]) -> FileReport:
        """Print the selected chart body of one file. Never writes."""
        path = Path(file_path)
        report = FileReport(path=path)
        selector = self.options.selector
        logger.info(f"Extracting {selector.difficulty} content from: {path}")

        try:
            for chart in list_charts(path):
                logger.info(f"  Chart: {chart}")

            results = self.extract(LineStore.from_text(read_chart(path)))
        except Exception as e:
            logger.error(f"❌ Error extracting {selector.difficulty} content from {path}: {e}")
            report.error = str(e)
            return report

        for result in results:
            logger.info("=== Section Content ===")
            for index, line in enumerate(result.content):
                logger.info(f"{index + 1}: {line}")
            logger.info("======================")
            report.outcomes.append(Outcome.FOUND)

        if not report.outcomes:
            report.outcomes.append(Outcome.NOT_FOUND)
        return report


def run_directory(
    directory: Union[str, Path],
    mode: Union[RunMode, str],
    options: ProcessOptions,
    backup: bool = True,
) -> List[FileReport]:
    """
    Extract or process every .sm file under `directory`.

    Raises:
        ValueError: If `directory` is empty
        FileNotFoundError: If `directory` does not exist
    """
    if not str(directory).strip():
        raise ValueError("Please provide a valid directory path.")

    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f'Directory "{directory}" does not exist.')

    mode = RunMode(mode)
    logger.info(f"Processing directory: {root}")

    chart_files = find_chart_files(root)
    logger.info(f"Found {len(chart_files)} .sm files.")

    simplifier = ChartSimplifier(options)
    reports = []
    for path in chart_files:
        if mode is RunMode.EXTRACT:
            reports.append(simplifier.extract_file(path))
        else:
            reports.append(simplifier.process_file(path, backup=backup))

    failed = sum(1 for r in reports if r.failed)
    changed = sum(1 for r in reports if r.changed)
    logger.info("=" * 40)
    logger.info(f"Files: {len(reports)}, changed: {changed}, failed: {failed}")
    return reports
