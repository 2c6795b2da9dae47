"""Data models for the JSON node graph codec."""

from .node import Node
from .selection_query import SelectionQuery
from .node_index import NodeIndex

__all__ = ["Node", "SelectionQuery", "NodeIndex"]
