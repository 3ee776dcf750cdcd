"""
errors.py - Failures reported at the I/O boundary

Each error is fatal to a run; launch.py logs it and exits non-zero.
"""


class TagCloudError(Exception):
    """Base class for tag cloud run failures."""


class InputUnavailable(TagCloudError):
    """The input text could not be opened, read or decoded."""


class InvalidCount(TagCloudError, ValueError):
    """The requested word count is not a non-negative integer."""


class OutputUnavailable(TagCloudError):
    """The rendered document could not be written."""
