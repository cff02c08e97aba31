"""Configuration model and loading."""

import argparse
import json
import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from nlsplit.core.terminators import UNICODE_TERMINATORS, TerminatorSet
from nlsplit.utils.constants import Constants
from nlsplit.utils.helpers import expand_file_path


def _same_file(first: str, second: str) -> bool:
    """Check whether two paths name the same file, following links."""
    if os.path.exists(first) and os.path.exists(second):
        return os.path.samefile(first, second)
    return os.path.realpath(first) == os.path.realpath(second)


class Config(BaseModel):
    """Settings for a command-line split run."""

    # Required to allow the non-Pydantic TerminatorSet type
    model_config = ConfigDict(arbitrary_types_allowed=True)

    input: str | None = None  # None reads stdin
    output: str | None = None  # None writes stdout
    terminators: TerminatorSet = UNICODE_TERMINATORS
    keep_terminators: bool = False
    format: Literal["text", "json", "yaml"] = "text"
    chunk_size: int = Field(default=Constants.DEFAULT_CHUNK_SIZE, gt=0)
    encoding: str = Constants.DEFAULT_ENCODING
    verbose: bool = False
    debug: bool = False

    @field_validator("terminators", mode="before")
    @classmethod
    def parse_terminators(cls, value: Any) -> Any:
        """Accept a preset name, comma-separated names or a list of names.

        A single string that names a preset ('ascii', 'unicode', 'unix',
        'none') selects it; anything else is read as terminator names.
        """
        if value is None:
            return UNICODE_TERMINATORS
        if isinstance(value, TerminatorSet):
            return value
        if isinstance(value, str):
            names = [name.strip() for name in value.split(Constants.NAME_SEPARATOR)]
            names = [name for name in names if name]
            if len(names) == 1:
                try:
                    return TerminatorSet.from_preset(names[0])
                except ValueError:
                    pass  # Not a preset; resolve as a terminator name below
            return TerminatorSet.from_names(names)
        if isinstance(value, (list, tuple, set, frozenset)):
            return TerminatorSet.from_names(value)
        return value

    @field_validator("input", "output", mode="before")
    @classmethod
    def expand_paths(cls, value: Any) -> Any:
        if value == Constants.STDIO_PATH:
            return None
        if isinstance(value, str):
            return expand_file_path(value)
        return value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Reject writing the output over the input being read."""
        if self.input is not None and self.output is not None:
            if _same_file(self.input, self.output):
                raise ValueError("input and output must be different files")
        if self.debug:
            self.verbose = True
        return self


def load_config(
    config_file: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Build a Config from an optional JSON file and command-line arguments.

    Command-line values override JSON values; arguments left unset on the
    command line (None) do not.

    Args:
        config_file: Path to a JSON config file, or None
        args: Parsed command-line arguments
        parser: Parser used to report configuration errors

    Returns:
        Validated configuration
    """
    values: dict[str, Any] = {}

    if config_file:
        path = expand_file_path(config_file)
        try:
            with open(path, encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            parser.error(f"Cannot read config file {config_file}: {e}")
        if not isinstance(values, dict):
            parser.error(f"Config file {config_file} must contain a JSON object")

    for key, value in vars(args).items():
        if key in Config.model_fields and value is not None:
            values[key] = value

    try:
        return Config(**values)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        parser.error(f"Invalid configuration: {messages}")
