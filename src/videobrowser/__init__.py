"""Confined HTTP browser for a single directory tree."""

PROGRAM_NAME = "videobrowser"
__version__ = "0.1.0"
