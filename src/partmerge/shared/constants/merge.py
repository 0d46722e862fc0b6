"""
Merge Constants

Default patterns, file naming and concatenation tool settings used by
discovery, grouping and execution.
"""

from typing import ClassVar


class MatcherDefaults:
    """Default regular expressions for candidate discovery and grouping."""

    VIDEO_EXTENSIONS: ClassVar[list[str]] = [
        "mp4",
        "mov",
        "mkv",
        "avi",
        "m4v",
        "mts",
        "m2ts",
        "lrv",
        "webm",
    ]

    # Applied case-insensitively
    GLOBAL_MATCHER = r"\.(?:" + "|".join(VIDEO_EXTENSIONS) + r")$"

    # DJI_1234_001.MP4 -> DJI_1234, GH010042_0001.MP4 -> no match
    GROUPING_MATCHER = r"^(?P<key>[^_]+_[^_]+)_"

    # Named group consulted before falling back to the trimmed match
    KEY_GROUP_NAME = "key"


class ConcatDefaults:
    """Concatenation tool defaults."""

    BINARY = "ffmpeg"
    OUTPUT_EXTENSION = "mp4"

    MANIFEST_PREFIX = ".partmerge-"
    MANIFEST_SUFFIX = ".txt"
    MANIFEST_DIRECTIVE = "file"
    MANIFEST_ENCODING = "utf-8"


__all__ = ["ConcatDefaults", "MatcherDefaults"]
