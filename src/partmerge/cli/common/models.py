"""
Pydantic models for CLI argument validation.

These models capture the command line exactly as given. ``None`` means an
option was not passed, so configuration files and environment values are
only overridden by options the user actually typed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MergeOptions(BaseModel):
    """Options of the merge command."""

    model_config = ConfigDict(frozen=True)

    global_matcher: str | None = None
    grouping_matcher: str | None = None
    directory: Path | None = None
    output_directory: Path | None = None
    config: Path | None = None
    ffmpeg: str | None = None
    natural_sort: bool | None = None
    overwrite: bool | None = None

    yes: bool = False
    dry_run: bool = False
    json_output: bool = False
    verbose: int = Field(default=0, ge=0)

    def settings_overrides(self) -> dict[str, Any]:
        """Keyword overrides for ``load_settings``, keyed by settings field."""
        return {
            "global_matcher": self.global_matcher,
            "grouping_matcher": self.grouping_matcher,
            "source_directory": self.directory,
            "output_directory": self.output_directory,
            "ffmpeg_binary": self.ffmpeg,
            "natural_sort": self.natural_sort,
            "overwrite": self.overwrite,
        }


__all__ = ["MergeOptions"]
