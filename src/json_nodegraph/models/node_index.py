"""Lookup tables derived once per decode call from node columns."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from .node import Node
from ..utils.path_codec import PathCodec


@dataclass
class NodeIndex:
    """
    Node map plus parent and children maps for one decode call.

    ``children`` is keyed by parent path; root-level paths are listed under
    the empty key. Child order follows first appearance in the input.
    """

    codec: PathCodec
    nodes: Dict[str, Node] = field(default_factory=dict)
    parents: Dict[str, str] = field(default_factory=dict)
    children: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def build(cls, paths: Sequence[Any], names: Sequence[Any], values: Sequence[Any],
              codec: Optional[PathCodec] = None) -> 'NodeIndex':
        """
        Build the index from three equal-length columns.

        Later duplicates of a path overwrite earlier ones. Names are kept
        as given, blank included.

        Raises:
            ValueError: If the columns differ in length
        """
        if not (len(paths) == len(names) == len(values)):
            raise ValueError(
                f"Column lengths differ: paths={len(paths)}, "
                f"names={len(names)}, values={len(values)}"
            )

        index = cls(codec=codec or PathCodec())

        for raw_path, raw_name, raw_value in zip(paths, names, values):
            path = _as_text(raw_path)
            if not path:
                continue

            parent_path = index.codec.parent_path(path)
            index.nodes[path] = Node(
                name=_as_text(raw_name),
                path=path,
                value=_as_text(raw_value),
                parent=index.codec.last_segment(parent_path) if parent_path else "",
                import_parent_path=parent_path,
                depth=index.codec.depth(path)
            )

        for path in index.nodes:
            parent_path = index.codec.parent_path(path)
            index.parents[path] = parent_path
            index.children.setdefault(parent_path, []).append(path)

        return index

    @property
    def paths(self) -> List[str]:
        """All known paths in input order."""
        return list(self.nodes)

    def __contains__(self, path: str) -> bool:
        return path in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def value_of(self, path: str) -> str:
        """Return the stored value of a path, empty when unknown."""
        node = self.nodes.get(path)
        return node.value if node else ""

    def name_of(self, path: str) -> str:
        node = self.nodes.get(path)
        return node.name if node else self.codec.last_segment(path)

    def has_value(self, path: str) -> bool:
        return self.value_of(path) != ""

    def children_of(self, path: str) -> List[str]:
        return self.children.get(path, [])

    def has_children(self, path: str) -> bool:
        return bool(self.children.get(path))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
