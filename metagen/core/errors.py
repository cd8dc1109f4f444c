"""Exception root shared by every metagen module."""


class MetadataError(Exception):
    """Base exception for fatal metadata generation errors."""


__all__ = ["MetadataError"]
