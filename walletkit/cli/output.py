"""Shared output utilities for CLI verbs."""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import yaml


class _TimestampAsStringLoader(yaml.SafeLoader):
    """SafeLoader that leaves ISO dates and timestamps as strings."""


_TimestampAsStringLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def print_result(result: Dict, compact: bool = False) -> None:
    """Print a result dict as JSON to stdout."""
    indent = None if compact else 2
    print(json.dumps(result, indent=indent, default=str))


def die(msg: str, code: int = 1) -> None:
    """Print error to stderr and exit."""
    print(f"error: {msg}", file=sys.stderr)
    sys.exit(code)


def load_document(path: str) -> Any:
    """Load a JSON or YAML document, exiting on unreadable or invalid input."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        die(f"cannot read {path}: {e}")

    if file_path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.load(text, Loader=_TimestampAsStringLoader)
        except yaml.YAMLError as e:
            die(f"invalid YAML in {path}: {e}")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        die(f"invalid JSON in {path}: {e}")
