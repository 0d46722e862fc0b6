"""partmerge Settings Configuration Model.

The merge configuration is fixed for a run: it is loaded once, validated,
frozen and passed explicitly into the core.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import toml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from partmerge.shared.constants import CLIDefaults, ConcatDefaults, MatcherDefaults

logger = logging.getLogger(__name__)


class MergeSettings(BaseSettings):
    """Immutable configuration for one merge run.

    Values come from (lowest to highest priority) defaults, ``PARTMERGE_*``
    environment variables and ``.env``, a TOML file, and CLI overrides.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARTMERGE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    global_matcher: str = Field(
        default=MatcherDefaults.GLOBAL_MATCHER,
        description="Regex selecting candidate filenames (case-insensitive)",
    )
    grouping_matcher: str = Field(
        default=MatcherDefaults.GROUPING_MATCHER,
        description="Regex whose first match yields the group key",
    )
    source_directory: Path = Field(
        default=Path(CLIDefaults.DEFAULT_SOURCE_DIRECTORY),
        description="Directory listed for candidate files",
    )
    output_directory: Path | None = Field(
        default=None,
        description="Directory for merged files, defaults to source_directory",
    )
    ffmpeg_binary: str = Field(
        default=ConcatDefaults.BINARY,
        min_length=1,
        description="Concatenation tool executable",
    )
    output_extension: str = Field(
        default=ConcatDefaults.OUTPUT_EXTENSION,
        min_length=1,
        description="Extension of merged files, without the dot",
    )
    natural_sort: bool = Field(
        default=False,
        description="Order group members by embedded numbers instead of plain text",
    )
    overwrite: bool = Field(
        default=False,
        description="Let the concatenation tool replace existing outputs",
    )

    @field_validator("global_matcher", "grouping_matcher")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Reject patterns that do not compile."""
        try:
            re.compile(v)
        except re.error as e:
            msg = f"invalid regular expression: {e}"
            raise ValueError(msg) from e
        return v

    @field_validator("output_extension")
    @classmethod
    def validate_output_extension(cls, v: str) -> str:
        """Store the extension without a leading dot."""
        extension = v.lstrip(".")
        if not extension:
            msg = "output_extension must not be empty"
            raise ValueError(msg)
        return extension

    @property
    def target_directory(self) -> Path:
        """Directory merged files are written to."""
        return self.output_directory or self.source_directory

    @classmethod
    def from_toml_file(cls, file_path: str | Path, **overrides: object) -> MergeSettings:
        """Load settings from TOML file; ``overrides`` win over file values."""
        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        logger.debug("Loaded configuration from %s", file_path)
        return cls(**{**raw_config, **overrides})


__all__ = ["MergeSettings"]
