"""Repair stage for named collections rebuilt as plain string arrays."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional
from ..config import CodecConfig
from ..utils.path_codec import PathCodec

if TYPE_CHECKING:
    from ..processors.graph_decoder import DecodeState, GraphDecoder


class RepairStage:
    """
    Last-chance correction for configured collection prefixes.

    The array classifier reads a mapping of item name to record, such as
    ``{"skills": {"python": {"level": 3}}}``, as an array of item names.
    When the input also holds property paths below those items, the string
    array is swapped for a mapping from each item name to its rebuilt
    record. Only prefixes listed in ``CodecConfig.repair_prefixes`` qualify.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the repair stage.

        Args:
            config: Optional codec configuration
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.codec = PathCodec(self.config.separator)
        self.logger = logger or logging.getLogger(__name__)

    def apply(self, state: 'DecodeState', decoder: 'GraphDecoder') -> int:
        """
        Repair every qualifying prefix in the decoded root.

        Args:
            state: DecodeState after array population
            decoder: GraphDecoder used to rebuild item records

        Returns:
            Number of collections replaced
        """
        repaired = 0

        for prefix in self.config.repair_prefixes:
            current = decoder.lookup(state.root, prefix)
            if not self._is_string_array(current):
                continue

            records: Dict[str, Any] = {}
            for item in current:
                item_path = self.codec.join(prefix, item)
                if state.included_children(item_path):
                    records[item] = decoder.build_object(item_path, state)

            if not records:
                continue

            replacement = {item: records.get(item, {}) for item in current}
            self._replace(state.root, prefix, replacement)
            repaired += 1
            self.logger.debug(f"Rebuilt {prefix!r} as a mapping of {len(replacement)} records")

        return repaired

    @staticmethod
    def _is_string_array(value: Any) -> bool:
        return isinstance(value, list) and bool(value) and all(
            isinstance(item, str) for item in value
        )

    def _replace(self, root: Dict[str, Any], path: str, value: Any) -> None:
        segments = self.codec.split(path)
        current = root
        for segment in segments[:-1]:
            current = current[segment]
        current[segments[-1]] = value
