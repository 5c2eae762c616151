from pathlib import Path

from model_config_harness.domain_models.enums import Platform
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.initializers.base import ArtifactInitializer

SHARED_LIBRARY_SUFFIXES = (".so", ".dylib", ".dll")


class CustomInitializer(ArtifactInitializer):
    @property
    def platform(self) -> str:
        return Platform.CUSTOM.value

    def check_artifact(self, artifact: Path, config: ModelConfig) -> None:
        if not artifact.name.endswith(SHARED_LIBRARY_SUFFIXES):
            self._fail(
                config, artifact.parent, f"custom backend '{artifact.name}' is not a shared library"
            )
