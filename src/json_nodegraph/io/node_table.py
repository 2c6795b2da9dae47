"""Row-oriented node table reading and writing."""

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
from ..models import Node
from ..types import CodecError, ErrorType


NODE_COLUMNS = ["name", "value", "importParentPath", "parent", "path", "depth"]
REQUIRED_COLUMNS = ("path", "name", "value")
SUPPORTED_FORMATS = ("csv", "json")


class NodeTableWriter:
    """
    Writer storing node lists as CSV rows or a JSON array of node objects.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the node table writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def render(self, nodes: List[Node], fmt: str = "csv") -> str:
        """
        Render nodes as table text.

        Args:
            nodes: Node list to render
            fmt: Output format, "csv" or "json"

        Returns:
            Table text
        """
        fmt = _check_format(fmt)

        if fmt == "json":
            return json.dumps([node.to_dict() for node in nodes], indent=2, ensure_ascii=False)

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=NODE_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for node in nodes:
            writer.writerow(node.to_dict())
        return buffer.getvalue()

    def write(self, nodes: List[Node], output_path: Union[str, Path],
              fmt: Optional[str] = None) -> Dict[str, Any]:
        """
        Write nodes to a file.

        Args:
            nodes: Node list to write
            output_path: Destination file
            fmt: Output format; guessed from the extension when omitted

        Returns:
            Dictionary with file information

        Raises:
            CodecError: If the file cannot be written
        """
        path = Path(output_path)
        fmt = _check_format(fmt or detect_format(path))
        content = self.render(nodes, fmt)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise CodecError(
                f"Failed to write node table {path}: {str(e)}",
                ErrorType.PROCESSING,
                context={"path": str(path)}
            )

        self.logger.info(f"Wrote {len(nodes)} nodes to {path}")
        return {
            "path": str(path.absolute()),
            "format": fmt,
            "rows": len(nodes),
            "size": len(content.encode("utf-8"))
        }


class NodeTableReader:
    """
    Reader turning stored node tables back into decode columns.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the node table reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read_rows(self, input_path: Union[str, Path],
                  fmt: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Read raw rows from a node table file.

        Raises:
            CodecError: If the file is unreadable or misses required columns
        """
        path = Path(input_path)
        fmt = _check_format(fmt or detect_format(path))

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CodecError(
                f"Failed to read node table {path}: {str(e)}",
                ErrorType.PROCESSING,
                context={"path": str(path)}
            )

        if fmt == "json":
            rows = self._parse_json(content, path)
        else:
            rows = list(csv.DictReader(io.StringIO(content)))

        for position, row in enumerate(rows):
            missing = [column for column in REQUIRED_COLUMNS if column not in row]
            if missing:
                raise CodecError(
                    f"Row {position} of {path} is missing columns: {', '.join(missing)}",
                    ErrorType.VALIDATION,
                    context={"path": str(path), "row": position}
                )

        self.logger.debug(f"Read {len(rows)} rows from {path}")
        return rows

    def read_columns(self, input_path: Union[str, Path],
                     fmt: Optional[str] = None) -> Tuple[List[str], List[str], List[str]]:
        """
        Read a node table as the (paths, names, values) decode columns.

        Args:
            input_path: Node table file
            fmt: Input format; guessed from the extension when omitted

        Returns:
            Tuple of equal-length path, name and value lists
        """
        rows = self.read_rows(input_path, fmt)
        paths = [_cell(row["path"]) for row in rows]
        names = [_cell(row["name"]) for row in rows]
        values = [_cell(row["value"]) for row in rows]
        return paths, names, values

    @staticmethod
    def _parse_json(content: str, path: Path) -> List[Dict[str, Any]]:
        try:
            rows = json.loads(content)
        except json.JSONDecodeError as e:
            raise CodecError(
                f"Invalid node table {path}: {e.msg} at line {e.lineno}, column {e.colno}",
                ErrorType.SYNTAX,
                context={"path": str(path)}
            )

        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise CodecError(
                f"Node table {path} must be a JSON array of objects",
                ErrorType.VALIDATION,
                context={"path": str(path)}
            )
        return rows


def detect_format(path: Path) -> str:
    """Guess a table format from a file extension."""
    suffix = path.suffix.lower().lstrip(".")
    return suffix if suffix in SUPPORTED_FORMATS else "csv"


def _check_format(fmt: str) -> str:
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported table format: {fmt}")
    return fmt


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
