"""
partmerge - join split recording parts with ffmpeg.

Cameras such as GoPro and DJI split long recordings into several files.
partmerge groups those parts by filename and concatenates each group
without re-encoding.
"""

from partmerge.shared.constants import CLIDefaults

__version__ = CLIDefaults.VERSION
__author__ = "partmerge contributors"

__all__ = ["__author__", "__version__"]
