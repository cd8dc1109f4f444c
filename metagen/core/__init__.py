"""Core utilities shared across metagen."""

from .errors import MetadataError
from .log import get_logger, setup_logging

__all__ = ["MetadataError", "get_logger", "setup_logging"]
