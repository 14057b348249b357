"""Tests for strict JSON, YAML and TOML decoders."""

import pytest

from layerconf.decoders import JSON_DECODER, TOML_DECODER, YAML_DECODER
from layerconf.exceptions import DecodeError


class TestStrictDecoders:
    """Test built-in strict formats."""

    @pytest.mark.asyncio
    async def test_json(self) -> None:
        """Test JSON decodes to nested data."""
        value = await JSON_DECODER.decode('{"a": {"b": [1, 2]}}', "a.json")
        assert value == {"a": {"b": [1, 2]}}

    @pytest.mark.asyncio
    async def test_yaml(self) -> None:
        """Test YAML decodes to nested data."""
        value = await YAML_DECODER.decode(
            """
key1: value1
key2:
  nested: value2
list:
  - item1
  - item2
""",
            "a.yaml",
        )
        assert value == {
            "key1": "value1",
            "key2": {"nested": "value2"},
            "list": ["item1", "item2"],
        }

    @pytest.mark.asyncio
    async def test_yaml_comments_only(self) -> None:
        """Test a YAML file with only comments decodes to None."""
        assert await YAML_DECODER.decode("# Just comments\n", "a.yaml") is None

    @pytest.mark.asyncio
    async def test_toml(self) -> None:
        """Test TOML tables decode to nested mappings."""
        value = await TOML_DECODER.decode('[database]\nhost = "db"\nport = 5432\n', "a.toml")
        assert value == {"database": {"host": "db", "port": 5432}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("decoder", "text", "name"),
        [
            (JSON_DECODER, "{nope", "JSON"),
            (YAML_DECODER, "invalid: yaml: content: [unclosed", "YAML"),
            (TOML_DECODER, "key = \"unterminated", "TOML"),
        ],
    )
    async def test_malformed_raises_decode_error(self, decoder, text: str, name: str) -> None:
        """Test malformed content raises DecodeError naming the format and file."""
        with pytest.raises(DecodeError, match=f"Failed to parse {name} file bad.x") as exc_info:
            await decoder.decode(text, "bad.x")
        assert exc_info.value.source == "bad.x"
