"""Shared errors and constants for partmerge."""
