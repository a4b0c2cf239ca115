"""Tests for writing generated artifacts."""

from pathlib import Path

from tokensmith.core.fileset import write_artifacts
from tokensmith.generators import GeneratorResult


def test_write_artifacts_creates_directory(tmp_path: Path) -> None:
    out_dir = tmp_path / "nested" / "tokens"
    results = [
        GeneratorResult(filename="tokens.css", content=":root {}\n", language="css"),
        GeneratorResult(filename="theme.ts", content="export const theme = {};\n", language="typescript"),
    ]

    written = write_artifacts(results, out_dir)

    assert written == [out_dir / "tokens.css", out_dir / "theme.ts"]
    assert (out_dir / "tokens.css").read_text(encoding="utf-8") == ":root {}\n"


def test_write_artifacts_overwrites(tmp_path: Path) -> None:
    (tmp_path / "tokens.css").write_text("old")

    write_artifacts([GeneratorResult("tokens.css", "new", "css")], tmp_path)

    assert (tmp_path / "tokens.css").read_text(encoding="utf-8") == "new"
