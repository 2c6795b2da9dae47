"""
JSON Node Graph - Bidirectional JSON tree to flat node list codec.

Flattens nested JSON values into path-addressed nodes suitable for
row-oriented storage, and rebuilds JSON from such nodes, optionally
restricted to a selected subgraph.
"""

__version__ = "1.0.0"

from .config import CodecConfig
from .models import Node, SelectionQuery
from .node_graph import NodeGraphCodec, encode, decode
from .types import CodecError, ErrorType

__all__ = [
    "NodeGraphCodec",
    "CodecConfig",
    "CodecError",
    "ErrorType",
    "Node",
    "SelectionQuery",
    "encode",
    "decode",
]
