"""Shared helpers for building decode inputs in tests."""

from typing import List, Tuple

from json_nodegraph.models import NodeIndex


def columns(rows: List[Tuple[str, str]]) -> Tuple[List[str], List[str], List[str]]:
    """Split (path, value) rows into decode columns named by last segment."""
    paths = [path for path, _ in rows]
    names = [path.rsplit(".", 1)[-1] for path in paths]
    values = [value for _, value in rows]
    return paths, names, values


def build_index(rows: List[Tuple[str, str]]) -> NodeIndex:
    """Build a NodeIndex from (path, value) rows."""
    return NodeIndex.build(*columns(rows))


def node_columns(nodes) -> Tuple[List[str], List[str], List[str]]:
    """Split encoder output into decode columns."""
    return (
        [node.path for node in nodes],
        [node.name for node in nodes],
        [node.value for node in nodes],
    )
