"""Selection of the paths to materialize for a subgraph query."""

import logging
from collections import deque
from typing import Optional, Set
from ..models import NodeIndex, SelectionQuery


class SubgraphSelector:
    """
    Computes the include set for a selection query.

    Each selected path contributes itself, its ancestor chain, optionally
    its siblings and its descendants down to ``descendant_depth`` levels.
    Contributions of several selected paths are unioned.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the subgraph selector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def select(self, query: SelectionQuery, index: NodeIndex) -> Set[str]:
        """
        Compute the include set.

        Args:
            query: Selection query of the current call
            index: NodeIndex of the current call

        Returns:
            Set of paths to materialize
        """
        if query.selects_all:
            return set(index.paths)

        included: Set[str] = set()

        for selected in query.selected_paths:
            if selected not in index:
                self.logger.debug(f"Selected path not found, skipping: {selected!r}")
                continue

            included.add(selected)
            included.update(index.codec.ancestors(selected))

            if query.include_siblings:
                parent_path = index.parents.get(selected, "")
                included.update(index.children_of(parent_path))

            if query.descendant_depth > 0:
                included.update(self._descendants(selected, query.descendant_depth, index))

        self.logger.debug(f"Selected {len(included)} of {len(index)} paths")
        return included

    @staticmethod
    def _descendants(path: str, max_level: int, index: NodeIndex) -> Set[str]:
        """Breadth-first descendants, direct children being level 1."""
        found: Set[str] = set()
        queue = deque((child, 1) for child in index.children_of(path))

        while queue:
            current, level = queue.popleft()
            found.add(current)
            if level < max_level:
                queue.extend((child, level + 1) for child in index.children_of(current))

        return found
