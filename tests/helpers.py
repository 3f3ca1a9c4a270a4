import copy
import json
from pathlib import Path


def write_params(tmp_path: Path, data: dict, filename: str = "params.json") -> Path:
    path = tmp_path / filename
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def clone_params(data: dict) -> dict:
    return copy.deepcopy(data)
