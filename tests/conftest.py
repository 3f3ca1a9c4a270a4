import json
from pathlib import Path

import pytest


@pytest.fixture
def sample_params_dict() -> dict:
    return json.loads(Path("sample_params.json").read_text(encoding="utf-8"))
