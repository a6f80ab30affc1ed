"""
Beatmap Simplifier for StepMania.

Finds .sm charts under a directory, backs them up and rewrites one
dance-single difficulty to a lighter step pattern, either in place or as
a new chart block.
"""
__version__ = "0.1.0"

from .chart_locator import ChartSelector, extract_target_from_section
from .chart_sections import parse_sections
from .config import ProcessOptions, load_options
from .line_store import LineStore
from .processor import ChartSimplifier, RunMode, run_directory
from .step_simplifier import simplify_steps

__all__ = [
    "ChartSelector",
    "ChartSimplifier",
    "LineStore",
    "ProcessOptions",
    "RunMode",
    "extract_target_from_section",
    "load_options",
    "parse_sections",
    "run_directory",
    "simplify_steps",
]
