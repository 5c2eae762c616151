from pathlib import Path

from model_config_harness.constants import SAVEDMODEL_PROTO_FILENAME
from model_config_harness.domain_models.enums import Platform
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.initializers.base import ArtifactInitializer


class GraphDefInitializer(ArtifactInitializer):
    @property
    def platform(self) -> str:
        return Platform.TENSORFLOW_GRAPHDEF.value


class SavedModelInitializer(ArtifactInitializer):
    """A SavedModel is a directory that must hold the serialized meta graph."""

    artifact_is_dir = True

    @property
    def platform(self) -> str:
        return Platform.TENSORFLOW_SAVEDMODEL.value

    def check_artifact(self, artifact: Path, config: ModelConfig) -> None:
        if not (artifact / SAVEDMODEL_PROTO_FILENAME).is_file():
            self._fail(
                config,
                artifact.parent,
                f"saved model '{artifact.name}' has no {SAVEDMODEL_PROTO_FILENAME}",
            )
