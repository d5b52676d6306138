"""Exceptions raised by the seam carving library."""


class SeamCarvingError(Exception):
    """Base class for all errors reported to callers of the library."""


class UsageError(SeamCarvingError):
    """Invalid arguments, e.g. a reduction that would leave an empty image."""


class ImageIOError(SeamCarvingError):
    """An image could not be decoded or the result could not be written."""
