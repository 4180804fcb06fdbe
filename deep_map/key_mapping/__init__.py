"""Path encoding and backend key mapping utilities."""

from .codec import DEFAULT_CODEC, PathCodec
from .mapper import KeyMapper


__all__ = ["DEFAULT_CODEC", "KeyMapper", "PathCodec"]
