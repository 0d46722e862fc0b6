"""Merge command helper functions."""
