"""Strict text decoders for JSON, YAML and TOML.

Malformed content raises DecodeError; the load pass is aborted and the
previous configuration is kept.
"""

import json

import toml
import yaml

from layerconf.decoders.base import StrictDecoder

JSON_DECODER = StrictDecoder("JSON", json.loads, (json.JSONDecodeError,))
YAML_DECODER = StrictDecoder("YAML", yaml.safe_load, (yaml.YAMLError,))
TOML_DECODER = StrictDecoder("TOML", toml.loads, (toml.TomlDecodeError,))
