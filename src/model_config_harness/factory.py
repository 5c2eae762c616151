import logging

from model_config_harness.domain_models.enums import Platform
from model_config_harness.initializers import (
    CustomInitializer,
    GraphDefInitializer,
    NetDefInitializer,
    PlanInitializer,
    SavedModelInitializer,
)
from model_config_harness.interfaces.base_initializer import BaseInitializer

logger = logging.getLogger(__name__)

# Default registry with one initializer per known platform.
# This can be extended at runtime
REGISTRY: dict[str, type[BaseInitializer]] = {
    Platform.TENSORFLOW_GRAPHDEF.value: GraphDefInitializer,
    Platform.TENSORFLOW_SAVEDMODEL.value: SavedModelInitializer,
    Platform.CAFFE2_NETDEF.value: NetDefInitializer,
    Platform.TENSORRT_PLAN.value: PlanInitializer,
    Platform.CUSTOM.value: CustomInitializer,
}


def register_initializer(platform: str, initializer_class: type[BaseInitializer]) -> None:
    """
    Registers an initializer for a platform, replacing any existing one.
    """
    REGISTRY[platform] = initializer_class
    logger.debug(f"Registered initializer: {platform} -> {initializer_class}")


def create_initializer(platform: str) -> BaseInitializer:
    """
    Instantiates the initializer registered for ``platform``.

    Raises:
        ValueError: If no initializer is registered for the platform.
    """
    initializer_class = REGISTRY.get(platform)
    if initializer_class is None:
        msg = f"Unknown platform: '{platform}'"
        raise ValueError(msg)
    return initializer_class()
