"""Fixtures for the test suite."""

import shutil
from pathlib import Path
from typing import Any

import pytest
import yaml

from model_config_harness.domain_models import ModelConfig
from model_config_harness.settings import HarnessSettings
from tests.common import MakeModel, simple_io

REPO_ROOT = Path(__file__).resolve().parent.parent
TESTDATA_DIR = REPO_ROOT / "testdata"


@pytest.fixture
def make_model(tmp_path: Path) -> MakeModel:
    """
    Factory building a model directory under ``tmp_path/models``.

    ``config`` is written as config.yaml when given, ``artifacts`` are created
    (empty) inside the ``1/`` version directory, a trailing slash making a
    directory, and ``goldens`` maps golden file names to their exact contents.
    """

    def _make(
        name: str,
        config: dict[str, Any] | None = None,
        artifacts: tuple[str, ...] = (),
        goldens: dict[str, str] | None = None,
        base: str = "models",
    ) -> Path:
        model_path = tmp_path / base / name
        version_path = model_path / "1"
        version_path.mkdir(parents=True)
        if config is not None:
            with (model_path / "config.yaml").open("w") as f:
                yaml.safe_dump(config, f, sort_keys=False)
        for artifact in artifacts:
            target = version_path / artifact
            if artifact.endswith("/"):
                target.mkdir(parents=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
        for golden_name, content in (goldens or {}).items():
            with (model_path / golden_name).open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        return model_path

    return _make


@pytest.fixture
def graphdef_config() -> ModelConfig:
    return ModelConfig.model_validate(
        {"name": "simple", "platform": "tensorflow_graphdef", **simple_io()}
    )


@pytest.fixture
def testdata_root(tmp_path: Path) -> Path:
    """Writable copy of the shipped fixture trees, since runs rewrite them."""
    root = tmp_path / "srcdir"
    shutil.copytree(TESTDATA_DIR, root / "testdata")
    return root


@pytest.fixture
def settings(tmp_path: Path) -> HarnessSettings:
    return HarnessSettings(test_root=tmp_path)
