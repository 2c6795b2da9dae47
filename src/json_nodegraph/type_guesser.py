"""Best-effort typing of stored string values during reconstruction."""

import logging
import re
from typing import Any, Optional


_NUMERIC = re.compile(r"-?[0-9]+(\.[0-9]+)?")
_NULLISH = {"", "null", "undefined"}


class TypeGuesser:
    """
    Infer a JSON scalar from its stored string form.

    The inference is lossy by nature: a zero-padded identifier such as
    ``"007"`` comes back as the number 7, and a string that happened to
    read ``"true"`` comes back as a boolean.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the type guesser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def guess(self, value: Any) -> Any:
        """
        Convert a stored string to the most likely JSON scalar.

        Args:
            value: Stored value; non-strings are returned unchanged

        Returns:
            None, int, float, bool or the original string
        """
        if value is None:
            return None

        if not isinstance(value, str):
            return value

        if value.strip().lower() in _NULLISH:
            return None

        if _NUMERIC.fullmatch(value):
            try:
                return float(value) if "." in value else int(value)
            except ValueError:
                self.logger.debug(f"Numeric-looking value kept as string: {value!r}")

        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False

        return value
