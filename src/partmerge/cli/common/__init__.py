"""Shared CLI plumbing: context, options and error handling."""
