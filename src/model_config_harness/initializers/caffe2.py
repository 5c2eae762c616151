from pathlib import Path

from model_config_harness.constants import NETDEF_INIT_FILENAME
from model_config_harness.domain_models.enums import Platform
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.initializers.base import ArtifactInitializer


class NetDefInitializer(ArtifactInitializer):
    """NetDef models ship the network and its init net side by side."""

    def __init__(self, init_filename: str = NETDEF_INIT_FILENAME) -> None:
        self.init_filename = init_filename

    @property
    def platform(self) -> str:
        return Platform.CAFFE2_NETDEF.value

    def check_artifact(self, artifact: Path, config: ModelConfig) -> None:
        if not (artifact.parent / self.init_filename).is_file():
            self._fail(config, artifact.parent, f"expected init file '{self.init_filename}'")
