from pathlib import Path

from model_config_harness.core.exceptions import InitializationError
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.interfaces.base_initializer import BaseInitializer


class PlatformInitializer(BaseInitializer):
    """Routes each model to the initializer registered for its declared platform."""

    @property
    def platform(self) -> str:
        return "*"

    def initialize(self, version_path: Path, config: ModelConfig) -> None:
        from model_config_harness.factory import create_initializer

        try:
            initializer = create_initializer(config.platform)
        except ValueError as e:
            msg = f"model '{config.name}': {e}"
            raise InitializationError(msg) from e
        initializer.initialize(version_path, config)
