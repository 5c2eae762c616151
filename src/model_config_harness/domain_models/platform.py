from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from model_config_harness.constants import NETDEF_INIT_FILENAME
from model_config_harness.domain_models.enums import InstanceKind, Platform


class BaseAdapterConfig(BaseModel):
    """Per-platform defaults consulted by normalization."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_model_filename: str
    default_instance_kind: InstanceKind = InstanceKind.KIND_GPU


class GraphDefAdapterConfig(BaseAdapterConfig):
    platform: Literal[Platform.TENSORFLOW_GRAPHDEF] = Platform.TENSORFLOW_GRAPHDEF
    default_model_filename: str = "model.graphdef"
    allow_soft_placement: bool = True
    gpu_memory_fraction: float = Field(default=0.0, ge=0.0, le=1.0)


class SavedModelAdapterConfig(BaseAdapterConfig):
    platform: Literal[Platform.TENSORFLOW_SAVEDMODEL] = Platform.TENSORFLOW_SAVEDMODEL
    default_model_filename: str = "model.savedmodel"
    allow_soft_placement: bool = True
    gpu_memory_fraction: float = Field(default=0.0, ge=0.0, le=1.0)


class NetDefAdapterConfig(BaseAdapterConfig):
    platform: Literal[Platform.CAFFE2_NETDEF] = Platform.CAFFE2_NETDEF
    default_model_filename: str = "model.netdef"
    init_filename: str = NETDEF_INIT_FILENAME


class PlanAdapterConfig(BaseAdapterConfig):
    platform: Literal[Platform.TENSORRT_PLAN] = Platform.TENSORRT_PLAN
    default_model_filename: str = "model.plan"


class CustomAdapterConfig(BaseAdapterConfig):
    platform: Literal[Platform.CUSTOM] = Platform.CUSTOM
    default_model_filename: str = "libcustom.so"
    default_instance_kind: InstanceKind = InstanceKind.KIND_CPU


AdapterConfig = Annotated[
    GraphDefAdapterConfig
    | SavedModelAdapterConfig
    | NetDefAdapterConfig
    | PlanAdapterConfig
    | CustomAdapterConfig,
    Field(discriminator="platform"),
]


class PlatformRegistry(BaseModel):
    """Mapping from platform name to that platform's adapter configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    platform_configs: dict[str, AdapterConfig] = Field(default_factory=dict)

    def __contains__(self, platform: object) -> bool:
        return platform in self.platform_configs

    def get(self, platform: str) -> BaseAdapterConfig | None:
        return self.platform_configs.get(platform)

    def platforms(self) -> list[str]:
        return list(self.platform_configs)


def build_platform_registry() -> PlatformRegistry:
    """
    Build a registry holding the default adapter config of every known platform.

    A new registry is returned on each call.
    """
    adapters: list[BaseAdapterConfig] = [
        GraphDefAdapterConfig(),
        SavedModelAdapterConfig(),
        NetDefAdapterConfig(),
        PlanAdapterConfig(),
        CustomAdapterConfig(),
    ]
    return PlatformRegistry(
        platform_configs={str(adapter.platform): adapter for adapter in adapters}  # type: ignore[attr-defined]
    )
