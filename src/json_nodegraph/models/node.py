"""Node model for flattened JSON tree positions."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Node:
    """
    One tree position of a flattened JSON document.

    ``value`` is the string form of a primitive leaf and empty for
    containers and array index nodes. ``parent`` holds the parent's name
    while ``import_parent_path`` holds its full path; both are empty for
    root-level nodes.
    """

    name: str
    path: str
    value: str = ""
    parent: str = ""
    import_parent_path: str = ""
    depth: int = 1

    def __post_init__(self):
        """Validate node after initialization."""
        if not self.path:
            raise ValueError("path cannot be empty")

        if self.depth < 1:
            raise ValueError("depth must be positive")

    @property
    def is_root(self) -> bool:
        """Check if this node sits at the root level."""
        return not self.import_parent_path

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "value": self.value,
            "importParentPath": self.import_parent_path,
            "parent": self.parent,
            "path": self.path,
            "depth": self.depth
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Node':
        """Create Node from dictionary."""
        return cls(
            name=data.get("name") or "",
            path=data["path"],
            value=data.get("value") or "",
            parent=data.get("parent") or "",
            import_parent_path=data.get("importParentPath") or "",
            depth=int(data.get("depth") or 1)
        )
