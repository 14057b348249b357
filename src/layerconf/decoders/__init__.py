"""File format decoders keyed by extension.

Built-in formats:
- json: strict JSON
- yaml / yml: YAML (safe loader)
- toml: TOML
- py: trusted Python script exporting ``config`` (see decoders.script)
"""

from layerconf.decoders.base import (
    DecoderRegistry,
    FormatDecoder,
    StrictDecoder,
    extension_of,
)
from layerconf.decoders.formats import JSON_DECODER, TOML_DECODER, YAML_DECODER
from layerconf.decoders.script import SCRIPT_DECODER, ScriptDecoder


def default_decoders(allow_scripts: bool | None = None) -> DecoderRegistry:
    """Build a registry with the built-in formats.

    Args:
        allow_scripts: Register the ``py`` script format. Defaults to the
            ``allow_script_sources`` setting.

    Returns:
        A new DecoderRegistry the caller may extend.
    """
    if allow_scripts is None:
        from layerconf.settings import get_settings  # noqa: PLC0415

        allow_scripts = get_settings().allow_script_sources

    registry = DecoderRegistry(
        {
            "json": JSON_DECODER,
            "yaml": YAML_DECODER,
            "yml": YAML_DECODER,
            "toml": TOML_DECODER,
        }
    )
    if allow_scripts:
        registry.register("py", SCRIPT_DECODER)
    return registry


__all__ = [
    "DecoderRegistry",
    "FormatDecoder",
    "StrictDecoder",
    "ScriptDecoder",
    "extension_of",
    "default_decoders",
    "JSON_DECODER",
    "YAML_DECODER",
    "TOML_DECODER",
    "SCRIPT_DECODER",
]
