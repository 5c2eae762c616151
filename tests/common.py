from collections.abc import Callable
from pathlib import Path
from typing import Any

MakeModel = Callable[..., Path]


def simple_io() -> dict[str, Any]:
    """Minimal valid input/output section."""
    return {
        "input": [{"name": "INPUT0", "data_type": "TYPE_FP32", "dims": [16]}],
        "output": [{"name": "OUTPUT0", "data_type": "TYPE_FP32", "dims": [16]}],
    }
