"""Main node graph codec exposing the encode and decode entry points."""

import json
import logging
from contextlib import nullcontext
from typing import List, Optional
from .config import CodecConfig
from .error_handler import ErrorHandler
from .models import Node, NodeIndex, SelectionQuery
from .parser import JSONParser
from .processors import GraphDecoder, GraphEncoder
from .profiler import PerformanceProfiler
from .types import CodecError, NodeGraphCodecInterface
from .utils.path_codec import PathCodec
from .utils.validation import ValidationUtils


class NodeGraphCodec(NodeGraphCodecInterface):
    """
    Bidirectional codec between JSON documents and flat node lists.

    Each call builds its own working state and discards it on return, so a
    single instance can serve any number of calls. Failures surface as one
    CodecError per call and never as a partial result.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the node graph codec.

        Args:
            config: Optional codec configuration
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.codec = PathCodec(self.config.separator)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger, max_depth=self.config.max_depth)
        self.encoder = GraphEncoder(self.config, self.logger)
        self.decoder = GraphDecoder(self.config, logger=self.logger)
        self.profiler = PerformanceProfiler(self.logger)

    def encode(self, json_string: str, debug: bool = False) -> List[Node]:
        """
        Flatten a JSON document into nodes.

        Args:
            json_string: JSON text of any root kind
            debug: Log statistics, profiling metrics and a self-check

        Returns:
            Nodes sorted by non-decreasing depth

        Raises:
            CodecError: If the text is not valid JSON or encoding fails
        """
        try:
            self.error_handler.raise_if_invalid(self.error_handler.validate_input(json_string))

            with self._profile("encode", len(json_string.encode("utf-8")), debug):
                data, root_type = self.parser.parse(json_string, validate=False)
                if debug:
                    stats = self.parser.get_structure_statistics(data)
                    self.logger.debug(f"Encoding {root_type.value} root: {stats}")

                nodes = self.encoder.encode(data)

                if debug:
                    self.profiler.record_output(nodes_processed=len(nodes))
                    self._self_check(nodes)

            return nodes

        except CodecError as e:
            self.error_handler.wrap_error(e, "encode")
            raise
        except Exception as e:
            raise self.error_handler.wrap_error(e, "encode") from e

    def decode(
        self,
        paths: List[str],
        names: List[str],
        values: List[str],
        selected_nodes: Optional[List[str]] = None,
        include_siblings: bool = False,
        descendant_depth: int = 1,
        debug: bool = False
    ) -> str:
        """
        Rebuild JSON text from node columns.

        Args:
            paths: Path column
            names: Name column
            values: Value column
            selected_nodes: Paths to restrict the output to; empty selects all
            include_siblings: Also include the siblings of each selected path
            descendant_depth: Levels of descendants to include below each selection
            debug: Log selection, classification and profiling details

        Returns:
            JSON text indented by two spaces

        Raises:
            CodecError: If the columns are invalid or reconstruction fails
        """
        try:
            self.error_handler.raise_if_invalid(
                self.error_handler.validate_columns(paths, names, values)
            )
            self.error_handler.raise_if_invalid(
                self.error_handler.validate_selection(selected_nodes, descendant_depth)
            )

            with self._profile("decode", len(paths), debug):
                index = NodeIndex.build(paths, names, values, self.codec)
                query = SelectionQuery(
                    selected_paths=list(selected_nodes or []),
                    include_siblings=include_siblings,
                    descendant_depth=descendant_depth
                )
                if debug:
                    self.logger.debug(f"Decoding {len(index)} nodes with {query}")

                root = self.decoder.decode(index, query)
                result = json.dumps(root, indent=2, ensure_ascii=False)

                if debug:
                    self.profiler.record_output(len(result.encode("utf-8")), len(index))

            return result

        except CodecError as e:
            self.error_handler.wrap_error(e, "decode")
            raise
        except Exception as e:
            raise self.error_handler.wrap_error(e, "decode") from e

    def _profile(self, operation: str, input_size: int, debug: bool):
        if debug:
            return self.profiler.profile_operation(operation, input_size)
        return nullcontext()

    def _self_check(self, nodes: List[Node]) -> None:
        result = ValidationUtils.validate_node_list(nodes, self.codec)
        for error in result.errors:
            self.logger.warning(f"Node list check: {error.message} at {error.location}")
        for warning in result.warnings:
            self.logger.debug(f"Node list check: {warning}")


def encode(json_string: str, debug: bool = False,
           config: Optional[CodecConfig] = None) -> List[Node]:
    """Flatten a JSON document into nodes with a one-off codec."""
    return NodeGraphCodec(config).encode(json_string, debug=debug)


def decode(paths: List[str], names: List[str], values: List[str],
           selected_nodes: Optional[List[str]] = None,
           include_siblings: bool = False,
           descendant_depth: int = 1,
           debug: bool = False,
           config: Optional[CodecConfig] = None) -> str:
    """Rebuild JSON text from node columns with a one-off codec."""
    return NodeGraphCodec(config).decode(
        paths, names, values,
        selected_nodes=selected_nodes,
        include_siblings=include_siblings,
        descendant_depth=descendant_depth,
        debug=debug
    )
