"""Shared pytest fixtures for tokensmith tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from tokensmith.core.ir import NormalizedTokens
from tokensmith.core.parser import parse_figma_tokens


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def token_file(fixtures_dir: Path) -> Path:
    """Return path to a realistic Figma token export."""
    return fixtures_dir / "figma_tokens.json"


@pytest.fixture
def raw_tokens(token_file: Path) -> dict[str, Any]:
    """Return the decoded token export."""
    return json.loads(token_file.read_text(encoding="utf-8"))


@pytest.fixture
def tokens(raw_tokens: dict[str, Any]) -> NormalizedTokens:
    """Return the parsed token model."""
    return parse_figma_tokens(raw_tokens)


@pytest.fixture
def colors_only() -> NormalizedTokens:
    """Return a model with colors and no typography."""
    return parse_figma_tokens(
        {
            "color": {
                "brand": {"primary": {"type": "color", "value": "#3366FF"}},
            }
        }
    )

