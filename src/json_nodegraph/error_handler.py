"""Error handling implementation for the JSON node graph codec."""

import logging
from typing import List, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    CodecError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for encode and decode calls.

    Runs input validation before any processing and converts every failure
    into a single CodecError at the call boundary.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_columns(self, paths: List[str], names: List[str],
                         values: List[str]) -> ValidationResult:
        """
        Validate decode columns.

        Args:
            paths: Path column
            names: Name column
            values: Value column

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_columns(paths, names, values)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def validate_selection(self, selected_nodes: Optional[List[str]],
                           descendant_depth: int) -> ValidationResult:
        """
        Validate selection arguments before a SelectionQuery is built.

        Args:
            selected_nodes: Selected paths, possibly None
            descendant_depth: Requested descendant depth

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(descendant_depth, bool) or not isinstance(descendant_depth, int):
            errors.append(ValidationError(
                type=ErrorType.VALIDATION,
                message=f"descendant_depth must be an integer, got {type(descendant_depth).__name__}",
                location="descendant_depth"
            ))
        elif descendant_depth < 0:
            errors.append(ValidationError(
                type=ErrorType.VALIDATION,
                message="descendant_depth must be non-negative",
                location="descendant_depth"
            ))

        blank = [path for path in selected_nodes or [] if not path]
        if blank:
            warnings.append(f"Ignoring {len(blank)} empty selected paths")
            self.logger.warning(warnings[-1])

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def raise_if_invalid(self, result: ValidationResult) -> None:
        """
        Raise a CodecError carrying every validation message.

        Args:
            result: ValidationResult to check

        Raises:
            CodecError: If the result is not valid
        """
        if result.is_valid:
            return

        messages = []
        for error in result.errors:
            if error.location:
                messages.append(f"{error.message} at {error.location}")
            else:
                messages.append(error.message)

        error_type = result.errors[0].type if result.errors else ErrorType.VALIDATION
        raise CodecError(
            f"Invalid input: {'; '.join(messages)}",
            error_type,
            context={"errors": [error.message for error in result.errors]}
        )

    def wrap_error(self, error: Exception, operation: str) -> CodecError:
        """
        Convert a failure into the boundary error of an operation.

        Args:
            error: Exception raised while processing
            operation: Name of the failing operation

        Returns:
            CodecError to raise; an existing CodecError is returned as is
        """
        if isinstance(error, CodecError):
            self.logger.error(f"{operation} failed: {error.error_type.value} - {error}")
            return error

        if isinstance(error, RecursionError):
            error_type = ErrorType.DEPTH
            message = f"{operation} failed: input nesting is too deep"
        else:
            error_type = ErrorType.PROCESSING
            message = f"{operation} failed: {str(error) or type(error).__name__}"

        self.logger.error(message)
        return CodecError(
            message,
            error_type,
            context={"operation": operation, "cause": type(error).__name__}
        )
