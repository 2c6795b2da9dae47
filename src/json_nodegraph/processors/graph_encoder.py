"""Graph encoder flattening JSON values into path-addressed nodes."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set
from ..config import CodecConfig
from ..models import Node
from ..types import CodecError, ErrorType
from ..utils.path_codec import PathCodec


@dataclass
class EncodeContext:
    """
    Working state of one encode call.

    ``visited`` is shared by every branch of the walk: the first branch to
    produce a path owns it and later emissions of the same path are dropped.
    Descendants of a dropped container are still walked and emitted.
    """

    max_depth: int
    visited: Set[str] = field(default_factory=set)
    nodes: List[Node] = field(default_factory=list)
    dropped: int = 0


class GraphEncoder:
    """
    Encoder turning a JSON value into a depth-ordered node list.

    Object keys become path segments. Primitive array elements use their
    own string form as the segment, while object and array elements use
    their index and get an index node of their own.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the graph encoder.

        Args:
            config: Optional codec configuration
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.codec = PathCodec(self.config.separator)
        self.logger = logger or logging.getLogger(__name__)

    def encode(self, data: Any) -> List[Node]:
        """
        Flatten a parsed JSON value.

        Args:
            data: Parsed JSON value of any kind

        Returns:
            Nodes sorted by non-decreasing depth, insertion order within a depth

        Raises:
            CodecError: If nesting exceeds the configured maximum depth
        """
        context = EncodeContext(max_depth=self.config.max_depth)
        self._walk(data, "", "", 1, context)

        nodes = sorted(context.nodes, key=lambda node: node.depth)

        if context.dropped:
            self.logger.debug(f"Dropped {context.dropped} repeated paths")
        self.logger.debug(f"Encoded {len(nodes)} nodes")
        return nodes

    def _walk(self, value: Any, path: str, name: str, depth: int,
              context: EncodeContext) -> None:
        """
        Emit the children of a container at ``path``.

        Args:
            value: Container or primitive found at ``path``
            path: Path of ``value``; empty for the root
            name: Name of the node at ``path``
            depth: Depth the children of ``value`` will have
            context: Call-scoped traversal state
        """
        if isinstance(value, dict):
            items = [(str(key), child) for key, child in value.items()]
        elif isinstance(value, list):
            items = [
                (str(position) if _is_container(child) else stringify(child), child)
                for position, child in enumerate(value)
            ]
        else:
            return

        if items and depth > context.max_depth:
            raise CodecError(
                f"Nesting depth exceeds maximum of {context.max_depth} at {path!r}",
                ErrorType.DEPTH,
                context={"path": path, "max_depth": context.max_depth}
            )

        for segment, child in items:
            child_path = self.codec.join(path, segment)
            if not child_path:
                context.dropped += 1
                continue

            self._emit(child_path, segment, child, path, name, context)
            if _is_container(child):
                self._walk(child, child_path, segment, depth + 1, context)

    def _emit(self, path: str, name: str, value: Any, parent_path: str,
              parent_name: str, context: EncodeContext) -> None:
        if path in context.visited:
            context.dropped += 1
            return

        context.visited.add(path)
        context.nodes.append(Node(
            name=name,
            path=path,
            value="" if _is_container(value) else stringify(value),
            parent=parent_name,
            import_parent_path=parent_path,
            depth=self.codec.depth(path)
        ))


def stringify(value: Any) -> str:
    """Return the stored string form of a primitive."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    return json.dumps(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))
