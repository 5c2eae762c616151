import os
from pathlib import Path

from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.interfaces.storage import BaseStorage


class LocalStorage(BaseStorage):
    """Storage backed by the local filesystem."""

    def list_children(self, path: Path) -> list[str]:
        # os.listdir keeps the filesystem's own ordering
        return os.listdir(path)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_config(self, path: Path) -> ModelConfig:
        return ModelConfig.from_yaml(path)

    def write_config(self, path: Path, config: ModelConfig) -> None:
        config.to_yaml(path)

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()
