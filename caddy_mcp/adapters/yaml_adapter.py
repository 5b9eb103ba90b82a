"""
YAML to Caddy JSON, converted in-process with PyYAML
"""

import json
from typing import Any, Dict

import yaml

from .base import AdaptResult, ConfigAdapter

# Top-level keys with this prefix only hold YAML anchors
EXTENSION_PREFIX = "x-"

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as the strings written in the document"""


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YAMLAdapter(ConfigAdapter):
    name = "yaml"

    async def adapt(self, body: bytes) -> AdaptResult:
        try:
            document = yaml.load(body.decode("utf-8"), Loader=ConfigLoader)
        except yaml.YAMLError as e:
            raise ValueError(str(e)) from e
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ValueError(f"top-level YAML document must be a mapping, got {type(document).__name__}")

        config: Dict[str, Any] = {
            key: value
            for key, value in document.items()
            if not (isinstance(key, str) and key.startswith(EXTENSION_PREFIX))
        }
        # NaN and Infinity have no JSON form
        return AdaptResult(output=json.dumps(config, separators=(",", ":"), allow_nan=False, default=str))
