"""Graph decoder rebuilding JSON values from node columns."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set
from ..config import CodecConfig
from ..engines.array_classifier import ArrayClassifier
from ..engines.repair_stage import RepairStage
from ..engines.subgraph_selector import SubgraphSelector
from ..models import NodeIndex, SelectionQuery
from ..type_guesser import TypeGuesser
from ..types import CodecError, ErrorType
from ..utils.path_codec import PathCodec


@dataclass
class DecodeState:
    """Working state of one decode call."""
    index: NodeIndex
    include: Set[str]
    array_parents: Set[str]
    root: Dict[str, Any] = field(default_factory=dict)

    def included_children(self, path: str) -> List[str]:
        return [child for child in self.index.children_of(path) if child in self.include]


class GraphDecoder:
    """
    Decoder rebuilding a JSON object from a node index.

    Reconstruction runs in ordered passes: a scaffold pass placing leaves
    and empty containers, an array population pass filling every array
    placeholder, and an optional repair stage for configured collections.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 classifier: Optional[ArrayClassifier] = None,
                 selector: Optional[SubgraphSelector] = None,
                 repair_stage: Optional[RepairStage] = None,
                 type_guesser: Optional[TypeGuesser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the graph decoder.

        Args:
            config: Optional codec configuration
            classifier: Optional ArrayClassifier instance
            selector: Optional SubgraphSelector instance
            repair_stage: Optional RepairStage instance
            type_guesser: Optional TypeGuesser instance
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.codec = PathCodec(self.config.separator)
        self.logger = logger or logging.getLogger(__name__)
        self.classifier = classifier or ArrayClassifier(self.config, logger=self.logger)
        self.selector = selector or SubgraphSelector(self.logger)
        self.repair_stage = repair_stage or RepairStage(self.config, self.logger)
        self.type_guesser = type_guesser or TypeGuesser(self.logger)

    def decode(self, index: NodeIndex, query: Optional[SelectionQuery] = None) -> Dict[str, Any]:
        """
        Rebuild the JSON object described by an index.

        Args:
            index: NodeIndex built from the decode columns
            query: Optional selection query; None selects everything

        Returns:
            Root object restricted to the selected subgraph
        """
        query = query or SelectionQuery()
        state = DecodeState(
            index=index,
            include=self.selector.select(query, index),
            array_parents=self.classifier.classify(index)
        )

        self.logger.debug(f"Decoding {len(state.include)} of {len(index)} paths, "
                          f"{len(state.array_parents)} array-classified")

        self._scaffold(state)
        self._populate_arrays(state)

        if self.config.enable_repair:
            repaired = self.repair_stage.apply(state, self)
            if repaired:
                self.logger.debug(f"Repair stage rebuilt {repaired} collections")

        return state.root

    def _scaffold(self, state: DecodeState) -> None:
        """Place typed leaves, nulls and empty containers for every free path."""
        for path in self._ordered(self._materialized_paths(state), state.index):
            if self._owned_by_array(path, state):
                continue

            if path in state.array_parents:
                self._assign(state.root, path, [])
            elif state.index.has_value(path):
                self._assign(state.root, path, self.type_guesser.guess(state.index.value_of(path)))
            elif not state.index.has_children(path):
                self._assign(state.root, path, None)
            else:
                self._assign(state.root, path, {}, keep_existing=True)

    def _populate_arrays(self, state: DecodeState) -> None:
        """Fill every array placeholder left by the scaffold pass."""
        for path in self._ordered(state.array_parents, state.index):
            if self._owned_by_array(path, state):
                continue

            placeholder = self.lookup(state.root, path)
            if isinstance(placeholder, list):
                self.fill_array(path, placeholder, state)

    def fill_array(self, path: str, items: List[Any], state: DecodeState) -> List[Any]:
        """
        Fill an array from the included children of ``path``.

        Named children become scalars, de-duplicated in first-seen order.
        Indexed children land at their index with null padding. An array
        left empty despite having children falls back to the children's
        own values or names.
        """
        self._check_depth(path)
        children = state.included_children(path)
        named = [child for child in children
                 if not self.codec.is_index(self.codec.last_segment(child))]
        indexed = [child for child in children
                   if self.codec.is_index(self.codec.last_segment(child))]

        for child in named:
            raw = state.index.value_of(child) or state.index.name_of(child)
            if raw:
                self._append_unique(items, self.type_guesser.guess(raw))

        for child in indexed:
            position = int(self.codec.last_segment(child))
            while len(items) <= position:
                items.append(None)

            if state.included_children(child):
                items[position] = self._build_element(child, state)
            else:
                items[position] = self.type_guesser.guess(state.index.value_of(child))

        if not items and children:
            self._fallback_fill(items, children, state)

        return items

    def build_object(self, path: str, state: DecodeState) -> Dict[str, Any]:
        """Build an object from the included descendants of ``path``."""
        self._check_depth(path)
        result: Dict[str, Any] = {}

        for child in state.included_children(path):
            key = self.codec.last_segment(child)
            if child in state.array_parents:
                result[key] = self.fill_array(child, [], state)
            elif state.included_children(child):
                result[key] = self.build_object(child, state)
            elif state.index.has_value(child):
                result[key] = self.type_guesser.guess(state.index.value_of(child))
            elif state.index.has_children(child):
                result[key] = {}
            else:
                result[key] = None

        return result

    def lookup(self, root: Dict[str, Any], path: str) -> Any:
        """Return the value at ``path`` in ``root``, or None when absent."""
        current: Any = root
        for segment in self.codec.split(path):
            if not isinstance(current, dict) or segment not in current:
                return None
            current = current[segment]
        return current

    def _build_element(self, path: str, state: DecodeState) -> Any:
        if path in state.array_parents:
            return self.fill_array(path, [], state)
        return self.build_object(path, state)

    def _fallback_fill(self, items: List[Any], children: List[str], state: DecodeState) -> None:
        for child in children:
            if state.index.has_value(child):
                self._append_unique(items, self.type_guesser.guess(state.index.value_of(child)))
                continue

            grandchildren = state.included_children(child)
            if grandchildren:
                for grandchild in grandchildren:
                    raw = state.index.value_of(grandchild) or state.index.name_of(grandchild)
                    if raw:
                        self._append_unique(items, self.type_guesser.guess(raw))
            elif state.index.name_of(child):
                self._append_unique(items, self.type_guesser.guess(state.index.name_of(child)))

    def _assign(self, root: Dict[str, Any], path: str, value: Any,
                keep_existing: bool = False) -> None:
        segments = self.codec.split(path)
        current = root
        for segment in segments[:-1]:
            next_value = current.get(segment)
            if not isinstance(next_value, dict):
                next_value = {}
                current[segment] = next_value
            current = next_value

        if keep_existing and isinstance(current.get(segments[-1]), dict):
            return
        current[segments[-1]] = value

    def _materialized_paths(self, state: DecodeState) -> Set[str]:
        """Included paths plus array-classified ancestors missing from the input."""
        paths = set(state.include)
        for path in state.include:
            paths.update(
                ancestor for ancestor in self.codec.ancestors(path)
                if ancestor in state.array_parents
            )
        return paths

    def _owned_by_array(self, path: str, state: DecodeState) -> bool:
        """Check whether an array-classified ancestor rebuilds this path."""
        return any(ancestor in state.array_parents for ancestor in self.codec.ancestors(path))

    def _ordered(self, paths: Set[str], index: NodeIndex) -> List[str]:
        positions = {path: position for position, path in enumerate(index.nodes)}
        unknown = len(positions)
        return sorted(
            paths,
            key=lambda path: (self.codec.depth(path), positions.get(path, unknown), path)
        )

    def _check_depth(self, path: str) -> None:
        depth = self.codec.depth(path)
        if depth > self.config.max_depth:
            raise CodecError(
                f"Path depth {depth} exceeds maximum of {self.config.max_depth}",
                ErrorType.DEPTH,
                context={"path": path}
            )

    @staticmethod
    def _append_unique(items: List[Any], value: Any) -> None:
        if not any(type(item) is type(value) and item == value for item in items):
            items.append(value)
