"""Heuristic classification of which paths were JSON arrays."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set
from ..config import CodecConfig
from ..models import NodeIndex


class ArrayRule(ABC):
    """
    One named, independent classification rule.

    ``classify`` tests every known path with ``matches``. Rules whose
    candidates are not input paths override ``classify`` as well.
    """

    name = "array_rule"

    def __init__(self, config: CodecConfig):
        self.config = config

    def classify(self, index: NodeIndex) -> Set[str]:
        """Return every path of ``index`` this rule marks as an array."""
        return {path for path in index.paths if self.matches(path, index)}

    @abstractmethod
    def matches(self, path: str, index: NodeIndex) -> bool:
        """Check whether ``path`` rebuilds as an array."""
        pass


class PluralNameRule(ArrayRule):
    """Valueless path with two or more children and a plural-looking name."""

    name = "plural_name"

    def matches(self, path: str, index: NodeIndex) -> bool:
        if index.has_value(path) or len(index.children_of(path)) < 2:
            return False

        segment = index.codec.last_segment(path).lower()
        suffix = self.config.plural_suffix.lower()
        return bool(suffix and segment.endswith(suffix)) or segment in self.config.collection_nouns


class UniformChildrenRule(ArrayRule):
    """Array-suggestive name over two or more children of uniform shape."""

    name = "uniform_children"

    def matches(self, path: str, index: NodeIndex) -> bool:
        children = index.children_of(path)
        if len(children) < 2:
            return False

        if index.codec.last_segment(path).lower() not in self.config.array_name_hints:
            return False

        if len({index.codec.depth(child) for child in children}) != 1:
            return False

        with_grandchildren = sum(1 for child in children if index.has_children(child))
        return with_grandchildren in (0, len(children))


class NumericChildRule(ArrayRule):
    """Any child whose last segment is an array index."""

    name = "numeric_child"

    def matches(self, path: str, index: NodeIndex) -> bool:
        return any(
            index.codec.is_index(index.codec.last_segment(child))
            for child in index.children_of(path)
        )


class ContainerNameRule(ArrayRule):
    """Generic container name on a path without an own value."""

    name = "container_name"

    def matches(self, path: str, index: NodeIndex) -> bool:
        if index.has_value(path):
            return False
        return index.codec.last_segment(path).lower() in self.config.container_names


class CatalogRule(ArrayRule):
    """Configured array prefixes present anywhere in the input."""

    name = "catalog"

    def classify(self, index: NodeIndex) -> Set[str]:
        return {prefix for prefix in self.config.array_catalog if self.matches(prefix, index)}

    def matches(self, path: str, index: NodeIndex) -> bool:
        return any(index.codec.is_under(candidate, path) for candidate in index.paths)


DEFAULT_RULES = (
    PluralNameRule,
    UniformChildrenRule,
    NumericChildRule,
    ContainerNameRule,
    CatalogRule,
)


class ArrayClassifier:
    """
    Union of independent rules deciding which paths rebuild as arrays.

    The result only grows: a path marked by any rule stays marked. The
    heuristic can mistake objects for arrays and the other way round.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 rules: Optional[Iterable[type]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the array classifier.

        Args:
            config: Optional codec configuration
            rules: Optional rule classes replacing the default set
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.rules: List[ArrayRule] = [
            rule(self.config) for rule in (rules if rules is not None else DEFAULT_RULES)
        ]

    def classify(self, index: NodeIndex) -> Set[str]:
        """
        Compute the array parent set of an index.

        Args:
            index: NodeIndex of the current decode call

        Returns:
            Set of array-classified paths
        """
        array_parents: Set[str] = set()

        for rule in self.rules:
            matched = rule.classify(index)
            if matched:
                self.logger.debug(f"Rule {rule.name} marked {len(matched)} paths: "
                                  f"{sorted(matched)[:10]}")
            array_parents |= matched

        return array_parents
