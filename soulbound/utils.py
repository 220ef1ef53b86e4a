import json
from pathlib import Path
from typing import Any

import yaml

from soulbound.constants import ARTIFACT_JSON_FORMAT, LOCAL_NETWORKS


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> Any:
    """Loads a JSON file."""
    with open(filepath, "r", encoding="utf-8") as file:
        return json.load(file)


def _write_json(data: Any, filepath: Path) -> Path:
    """Writes data as 2-space indented JSON, replacing any existing file."""
    with open(filepath, "w", encoding="utf-8") as file:
        json.dump(data, file, **ARTIFACT_JSON_FORMAT)
    return filepath


def is_local_network(network_name: str) -> bool:
    return network_name in LOCAL_NETWORKS
