"""Validation utilities for JSON input, node lists and decode columns."""

import json
from typing import List, Optional, Sequence, Set
from ..types import ValidationResult, ValidationError, ErrorType
from ..models.node import Node
from .path_codec import PathCodec


class ValidationUtils:
    """Utility class for validating inputs and encoder output."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(json_string, str):
            errors.append(ValidationError(
                type=ErrorType.VALIDATION,
                message=f"JSON input must be a string, got {type(json_string).__name__}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.DEPTH,
                message="JSON nesting is too deep to parse",
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_columns(paths: Sequence[str], names: Sequence[str],
                         values: Sequence[str]) -> ValidationResult:
        """
        Validate that decode columns line up row for row.

        Args:
            paths: Path column
            names: Name column
            values: Value column

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        for label, column in (("paths", paths), ("names", names), ("values", values)):
            if column is None:
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message=f"{label} column is missing",
                    location=label
                ))

        if errors:
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not (len(paths) == len(names) == len(values)):
            errors.append(ValidationError(
                type=ErrorType.VALIDATION,
                message=(f"paths, names and values must have equal length "
                         f"(got {len(paths)}, {len(names)}, {len(values)})"),
                location="columns"
            ))
        else:
            blank_rows = sum(1 for path in paths if not path)
            if blank_rows:
                warnings.append(f"{blank_rows} rows have an empty path and will be ignored")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_node_list(nodes: List[Node],
                           codec: Optional[PathCodec] = None) -> ValidationResult:
        """
        Check encoder output for depth, uniqueness, ordering and linkage.

        Args:
            nodes: Node list as produced by the encoder
            codec: Path codec matching the encoder's separator

        Returns:
            ValidationResult with one error per violated node
        """
        codec = codec or PathCodec()
        errors = []
        warnings = []
        seen: Set[str] = set()

        for position, node in enumerate(nodes):
            location = f"node {position} ({node.path})"

            if node.path in seen:
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message="Duplicate path",
                    location=location
                ))

            if node.depth != codec.depth(node.path):
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message=f"Depth {node.depth} does not match segment count "
                            f"{codec.depth(node.path)}",
                    location=location
                ))

            parent_path = codec.parent_path(node.path)
            if node.import_parent_path != parent_path:
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message=f"importParentPath {node.import_parent_path!r} does not "
                            f"match {parent_path!r}",
                    location=location
                ))
            elif parent_path and node.parent != codec.last_segment(parent_path):
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message=f"parent {node.parent!r} does not name the parent node",
                    location=location
                ))

            if parent_path and parent_path not in seen:
                errors.append(ValidationError(
                    type=ErrorType.VALIDATION,
                    message=f"Ancestor {parent_path!r} does not precede this node",
                    location=location
                ))

            if node.name != codec.last_segment(node.path):
                warnings.append(f"{location}: name differs from last path segment")

            seen.add(node.path)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
