"""Segment arithmetic over separator-joined path strings."""

import re
from typing import List


_INDEX_SEGMENT = re.compile(r"[0-9]+")


class PathCodec:
    """
    Naive split/join path utility.

    Segments are never escaped: a key containing the separator produces a
    path that cannot be told apart from a deeper one. Empty segments are
    passed through unchanged.
    """

    def __init__(self, separator: str = "."):
        if not separator:
            raise ValueError("separator cannot be empty")
        self.separator = separator

    def split(self, path: str) -> List[str]:
        """Split a path into its segments."""
        return path.split(self.separator)

    def last_segment(self, path: str) -> str:
        """Return the final segment of a path."""
        return path.rsplit(self.separator, 1)[-1]

    def parent_path(self, path: str) -> str:
        """Return the parent path, or an empty string at the root."""
        if self.separator not in path:
            return ""
        return path.rsplit(self.separator, 1)[0]

    def depth(self, path: str) -> int:
        """Return the number of segments in a path."""
        return path.count(self.separator) + 1

    def join(self, parent: str, segment: str) -> str:
        """Append a segment to a parent path."""
        if not parent:
            return segment
        return f"{parent}{self.separator}{segment}"

    def ancestors(self, path: str) -> List[str]:
        """Return every proper ancestor of a path, root first."""
        segments = self.split(path)
        return [
            self.separator.join(segments[:i])
            for i in range(1, len(segments))
        ]

    def is_under(self, path: str, prefix: str) -> bool:
        """Check whether a path equals or is nested under a prefix."""
        return path == prefix or path.startswith(prefix + self.separator)

    @staticmethod
    def is_index(segment: str) -> bool:
        """Check whether a segment is a decimal array index."""
        return _INDEX_SEGMENT.fullmatch(segment) is not None
