"""Core type definitions for the JSON node graph codec."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class DataType(Enum):
    """Enumeration of JSON value kinds."""
    DICT = "dict"
    LIST = "list"
    PRIMITIVE = "primitive"


class ErrorType(Enum):
    """Enumeration of error types."""
    VALIDATION = "validation"
    SYNTAX = "syntax"
    DEPTH = "depth"
    PROCESSING = "processing"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class CodecError(Exception):
    """User-visible error raised by the encode and decode entry points."""

    def __init__(self, message: str, error_type: ErrorType,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class NodeGraphCodecInterface(ABC):
    """Abstract interface for the node graph codec."""

    @abstractmethod
    def encode(self, json_string: str, debug: bool = False) -> List['Node']:
        """Flatten a JSON document into a depth-ordered node list."""
        pass

    @abstractmethod
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
        """Rebuild formatted JSON text from node columns."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def validate_columns(self, paths: List[str], names: List[str],
                         values: List[str]) -> ValidationResult:
        """Validate decode input columns."""
        pass

    @abstractmethod
    def wrap_error(self, error: Exception, operation: str) -> CodecError:
        """Convert any failure into the boundary error."""
        pass
