"""Load an OpenAPI document from a JSON or YAML file."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml

BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class SchemaLoadError(Exception):
    """Raised when the input document cannot be read or parsed."""


class SchemaYamlLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 core scalars.

    Only true/false resolve to booleans, so enums such as `[on, off]` stay
    strings. Timestamps are not resolved either; an unquoted
    `default: 2020-01-01` is kept as the string it is written as.
    """


SchemaYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (BOOL_TAG, TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SchemaYamlLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_document(path: Path | str) -> dict[str, Any]:
    """Load the OpenAPI document from disk.

    Files ending in `.json` are parsed as JSON, anything else as YAML.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read input file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            parsed = json.loads(text)
        else:
            parsed = yaml.load(text, Loader=SchemaYamlLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaLoadError(f"Failed to parse input file {path}: {exc}") from exc

    if not isinstance(parsed, dict):
        raise SchemaLoadError(f"Input file {path} must contain a mapping at the root")

    return parsed
