"""Contains utility functions for working with YAML (and JSON) settings files."""

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

yaml = YAML(typ="safe")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Loads a YAML file and returns a dictionary.

    JSON is a subset of YAML, so JSON settings files are loaded the same way.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}, found {type(data).__name__}")
    return data
