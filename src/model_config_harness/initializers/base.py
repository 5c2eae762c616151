import logging
from pathlib import Path

from model_config_harness.core.exceptions import InitializationError
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.interfaces.base_initializer import BaseInitializer

logger = logging.getLogger(__name__)


class ArtifactInitializer(BaseInitializer):
    """
    Initializer that checks the configured model file is present in the version directory.

    Artifacts are located, never read: subclasses only add structural checks
    such as companion files or the artifact being a directory.
    """

    artifact_is_dir: bool = False

    def initialize(self, version_path: Path, config: ModelConfig) -> None:
        if config.platform != self.platform:
            self._fail(
                config,
                version_path,
                f"initializer for '{self.platform}' cannot load platform '{config.platform}'",
            )

        if not version_path.is_dir():
            self._fail(config, version_path, "version directory not found")

        artifact = version_path / config.default_model_filename
        if self.artifact_is_dir:
            if not artifact.is_dir():
                self._fail(
                    config,
                    version_path,
                    f"expected model directory '{config.default_model_filename}'",
                )
        elif not artifact.is_file():
            self._fail(
                config, version_path, f"expected model file '{config.default_model_filename}'"
            )

        self.check_artifact(artifact, config)
        logger.debug(f"{self} accepted {version_path}")

    def check_artifact(self, artifact: Path, config: ModelConfig) -> None:
        """Platform-specific structural checks on the located artifact."""

    @staticmethod
    def _fail(config: ModelConfig, version_path: Path, reason: str) -> None:
        msg = f"model '{config.name}' version {version_path.name}: {reason}"
        raise InitializationError(msg)
