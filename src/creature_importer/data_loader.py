import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .exceptions import FormatValidationError

logger = logging.getLogger(__name__)


class PayloadLoader:
    """
    Loads creature payloads from a file path or raw JSON text.
    """
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, source: Union[str, Path]) -> Dict[str, Any]:
        text = self._read(source)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise FormatValidationError(
                field="payload",
                expected="JSON object",
                actual=f"invalid JSON at line {e.lineno}, column {e.colno}",
            ) from e

        if not isinstance(payload, dict):
            raise FormatValidationError(
                field="payload",
                expected="JSON object",
                actual=type(payload).__name__,
            )
        return payload

    def _read(self, source: Union[str, Path]) -> str:
        if isinstance(source, Path):
            return self._read_file(source)

        stripped = source.lstrip()
        if stripped.startswith("{") or stripped.startswith("["):
            return source

        # Text too long to be a path is not one
        try:
            is_file = Path(source).is_file()
        except OSError:
            return source
        return self._read_file(Path(source)) if is_file else source

    def _read_file(self, path: Path) -> str:
        logger.info(f"Loading creature payload from {path}")
        try:
            with open(path, encoding=self.encoding) as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise FormatValidationError(
                field="payload",
                expected=f"{self.encoding} text",
                actual=f"undecodable byte at position {e.start}",
            ) from e
        except OSError as e:
            raise FormatValidationError(
                field="payload",
                expected="readable file",
                actual=str(e),
            ) from e
