"""Utility modules for the JSON node graph codec."""

from .path_codec import PathCodec
from .validation import ValidationUtils

__all__ = ["PathCodec", "ValidationUtils"]
