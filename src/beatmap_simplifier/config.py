"""
Run options for the simplifier.

Values come from the command line first, then from the environment (a .env
file is loaded if present), then from the defaults below.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .chart_locator import ChartSelector, parse_section_pair
from .chart_writer import InsertSide

# --- DEFAULTS ---
DEFAULT_SECTION = "Beginner:2"
DEFAULT_ACTION = "Insert Before"
DEFAULT_NEW_SECTION = "Novice:1"

ENV_SECTION = "BEATMAP_SECTION"
ENV_ACTION = "BEATMAP_ACTION"
ENV_NEW_SECTION = "BEATMAP_NEW_SECTION"


class ProcessOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_to_extract: str = Field(..., description="Chart to simplify as 'Difficulty:steps', e.g. 'Beginner:2'")
    action: str = Field(..., description="'Replace', 'Insert Before' or 'Insert After'")
    new_section_name: str = Field(..., description="Label of the inserted chart as 'Difficulty:steps', e.g. 'Novice:1'")

    @field_validator("section_to_extract", "new_section_name")
    @classmethod
    def check_pair(cls, value: str) -> str:
        parse_section_pair(value)
        return value.strip()

    @field_validator("action")
    @classmethod
    def check_action(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Action is empty, expected 'Replace', 'Insert Before' or 'Insert After'")
        return value.strip()

    @property
    def selector(self) -> ChartSelector:
        return ChartSelector.from_pair(self.section_to_extract)

    @property
    def new_selector(self) -> ChartSelector:
        return ChartSelector.from_pair(self.new_section_name)

    @property
    def is_replace(self) -> bool:
        return "replace" in self.action.lower()

    @property
    def insert_side(self) -> InsertSide:
        return InsertSide.from_action(self.action)


def load_options(
    section: Optional[str] = None,
    action: Optional[str] = None,
    new_section: Optional[str] = None,
    env_file: Optional[str] = None,
) -> ProcessOptions:
    """
    Resolve and validate run options.

    Raises:
        pydantic.ValidationError: If a value is empty or not 'Difficulty:steps'
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    return ProcessOptions(
        section_to_extract=section if section is not None else os.environ.get(ENV_SECTION, DEFAULT_SECTION),
        action=action if action is not None else os.environ.get(ENV_ACTION, DEFAULT_ACTION),
        new_section_name=new_section if new_section is not None else os.environ.get(ENV_NEW_SECTION, DEFAULT_NEW_SECTION),
    )
