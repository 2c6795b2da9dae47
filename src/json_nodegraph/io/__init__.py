"""I/O utilities for node tables."""

from .node_table import NodeTableReader, NodeTableWriter

__all__ = ["NodeTableReader", "NodeTableWriter"]
