"""
Writing generated artifacts to disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..generators.base import GeneratorResult

logger = logging.getLogger(__name__)


def write_artifacts(results: Iterable[GeneratorResult], out_dir: Path) -> list[Path]:
    """
    Write each artifact to ``out_dir/<filename>``.

    Args:
        results: Generated artifacts, written in order.
        out_dir: Target directory, created if missing.

    Returns:
        Paths of the written files.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for result in results:
        path = out_dir / result.filename
        path.write_text(result.content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        written.append(path)
    return written
