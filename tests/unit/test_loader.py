"""Tests for token file loading."""

from pathlib import Path

import pytest

from tokensmith.core.errors import TokenFileError
from tokensmith.core.loader import load_token_file, load_token_text


class TestLoadTokenText:
    """Tests for load_token_text."""

    def test_object(self) -> None:
        assert load_token_text('{"color": {}}') == {"color": {}}

    def test_invalid_json_has_location(self) -> None:
        with pytest.raises(TokenFileError) as exc_info:
            load_token_text('{\n  "color": {,}\n}', source=Path("tokens.json"))
        error = exc_info.value
        assert error.message.startswith("Invalid JSON")
        assert error.context is not None
        assert error.context.line == 2
        assert "tokens.json:2:" in str(error)
        assert "^^^" in str(error)

    def test_invalid_json_without_source(self) -> None:
        with pytest.raises(TokenFileError) as exc_info:
            load_token_text("not json")
        assert exc_info.value.context is None

    @pytest.mark.parametrize("text", ["[]", "3", '"color"', "null"])
    def test_non_object_rejected(self, text: str) -> None:
        with pytest.raises(TokenFileError, match="Expected a JSON object"):
            load_token_text(text)


class TestLoadTokenFile:
    """Tests for load_token_file."""

    def test_fixture(self, token_file: Path) -> None:
        data = load_token_file(token_file)
        assert set(data) == {"color", "font", "gradient", "effect"}

    def test_wrong_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.txt"
        path.write_text("{}")
        with pytest.raises(TokenFileError, match=r"Only \.json"):
            load_token_file(path)

    def test_uppercase_extension_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.JSON"
        path.write_text("{}")
        assert load_token_file(path) == {}

    def test_byte_order_mark_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"color": {}}')
        assert load_token_file(path) == {"color": {}}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TokenFileError, match="Could not read"):
            load_token_file(tmp_path / "missing.json")

    def test_binary_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        path.write_bytes(b"\xff\xfe\x00\x80")
        with pytest.raises(TokenFileError):
            load_token_file(path)
