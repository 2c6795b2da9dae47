"""JSON parser with validation and nesting depth guard."""

import json
import logging
from typing import Any, Dict, Optional, Tuple
from .types import DataType, CodecError, ErrorType
from .error_handler import ErrorHandler


class JSONParser:
    """
    JSON parser that accepts any JSON root and bounds its nesting depth.

    Depth is measured iteratively so that measuring a pathological
    document cannot itself exhaust the stack.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 max_depth: int = 256):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
            max_depth: Maximum accepted nesting depth
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth

    def parse(self, json_string: str, validate: bool = True) -> Tuple[Any, DataType]:
        """
        Parse JSON string and report the kind of its root value.

        Args:
            json_string: JSON string to parse
            validate: Run input validation first; callers that already
                validated the text pass False

        Returns:
            Tuple of (parsed_data, root_data_type)

        Raises:
            ValueError: If JSON is invalid
            CodecError: If nesting exceeds max_depth
        """
        if validate:
            validation_result = self.error_handler.validate_input(json_string)
            if not validation_result.is_valid:
                error_messages = [error.message for error in validation_result.errors]
                raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")

        depth = self.calculate_nesting_depth(data)
        if depth > self.max_depth:
            raise CodecError(
                f"Nesting depth {depth} exceeds maximum of {self.max_depth}",
                ErrorType.DEPTH,
                context={"depth": depth, "max_depth": self.max_depth}
            )

        root_type = self.detect_root_type(data)
        self.logger.debug(f"Parsed JSON with root type: {root_type.value}, depth: {depth}")
        return data, root_type

    @staticmethod
    def detect_root_type(data: Any) -> DataType:
        """Classify a parsed value as dict, list or primitive."""
        if isinstance(data, dict):
            return DataType.DICT
        elif isinstance(data, list):
            return DataType.LIST
        else:
            return DataType.PRIMITIVE

    @staticmethod
    def calculate_nesting_depth(data: Any) -> int:
        """Calculate maximum container nesting depth without recursion."""
        max_depth = 0
        stack = [(data, 0)]

        while stack:
            value, depth = stack.pop()
            if isinstance(value, dict):
                children = value.values()
            elif isinstance(value, list):
                children = value
            else:
                max_depth = max(max_depth, depth)
                continue

            max_depth = max(max_depth, depth + 1)
            for child in children:
                if isinstance(child, (dict, list)):
                    stack.append((child, depth + 1))

        return max_depth

    def get_structure_statistics(self, data: Any) -> Dict[str, Any]:
        """
        Get statistics about the parsed structure.

        Args:
            data: Parsed data to analyze

        Returns:
            Dictionary with structure statistics
        """
        stats = {
            "max_depth": self.calculate_nesting_depth(data),
            "dict_count": 0,
            "list_count": 0,
            "primitive_count": 0,
            "total_keys": 0,
            "total_items": 0,
            "root_type": self.detect_root_type(data).value
        }

        stack = [data]
        while stack:
            value = stack.pop()
            if isinstance(value, dict):
                stats["dict_count"] += 1
                stats["total_keys"] += len(value)
                stack.extend(value.values())
            elif isinstance(value, list):
                stats["list_count"] += 1
                stats["total_items"] += len(value)
                stack.extend(value)
            else:
                stats["primitive_count"] += 1

        return stats
