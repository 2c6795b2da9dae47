"""Selection query model for subgraph reconstruction."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class SelectionQuery:
    """
    Caller-chosen subgraph to materialize during decode.

    An empty ``selected_paths`` list selects the whole graph.
    """

    selected_paths: List[str] = field(default_factory=list)
    include_siblings: bool = False
    descendant_depth: int = 1

    def __post_init__(self):
        """Validate query after initialization."""
        if self.selected_paths is None:
            self.selected_paths = []

        if not isinstance(self.selected_paths, list):
            self.selected_paths = list(self.selected_paths)

        if self.descendant_depth < 0:
            raise ValueError("descendant_depth must be non-negative")

    @property
    def selects_all(self) -> bool:
        """Check if the query covers every known path."""
        return not self.selected_paths
