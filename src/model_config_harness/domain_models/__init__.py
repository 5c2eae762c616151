from model_config_harness.domain_models.enums import DataType, InstanceKind, Platform, TensorFormat
from model_config_harness.domain_models.model_config import (
    AllVersionPolicy,
    LatestVersionPolicy,
    ModelConfig,
    ModelInput,
    ModelInstanceGroup,
    ModelOutput,
    ModelVersionPolicy,
    SpecificVersionPolicy,
)
from model_config_harness.domain_models.platform import (
    BaseAdapterConfig,
    PlatformRegistry,
    build_platform_registry,
)
from model_config_harness.domain_models.results import ModelOutcome, RunReport, ValidationResult

__all__ = [
    "AllVersionPolicy",
    "BaseAdapterConfig",
    "DataType",
    "InstanceKind",
    "LatestVersionPolicy",
    "ModelConfig",
    "ModelInput",
    "ModelInstanceGroup",
    "ModelOutcome",
    "ModelOutput",
    "ModelVersionPolicy",
    "Platform",
    "PlatformRegistry",
    "RunReport",
    "SpecificVersionPolicy",
    "TensorFormat",
    "ValidationResult",
    "build_platform_registry",
]
