"""
Boundary loading for token export files.

Everything that can go wrong with an uploaded file is detected here, before
the parser ever sees the data: wrong extension, unreadable file, invalid JSON
syntax, or a top-level value that is not an object.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import make_token_file_error

logger = logging.getLogger(__name__)

TOKEN_FILE_SUFFIX = ".json"


def load_token_text(text: str, source: Path | None = None) -> dict[str, Any]:
    """
    Decode a token export from a JSON string.

    Args:
        text: Raw file contents.
        source: Optional path used to locate errors.

    Returns:
        The decoded top-level JSON object.

    Raises:
        TokenFileError: If the text is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.splitlines()
        snippet = lines[e.lineno - 1] if 0 < e.lineno <= len(lines) else None
        raise make_token_file_error(
            f"Invalid JSON: {e.msg}",
            file=source,
            line=e.lineno,
            column=e.colno,
            snippet=snippet,
        ) from e

    if not isinstance(data, dict):
        raise make_token_file_error(
            f"Expected a JSON object at the top level, got {type(data).__name__}",
            file=source,
        )
    return data


def load_token_file(path: Path) -> dict[str, Any]:
    """
    Read and decode a token export file.

    Args:
        path: Path to a ``.json`` export.

    Returns:
        The decoded top-level JSON object.

    Raises:
        TokenFileError: If the file is rejected.
    """
    if path.suffix.lower() != TOKEN_FILE_SUFFIX:
        raise make_token_file_error("Only .json token files can be converted", file=path)

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise make_token_file_error(f"Could not read token file: {e}", file=path) from e

    logger.debug("Loaded %s (%d bytes)", path, len(text))
    return load_token_text(text, source=path)
