from model_config_harness.initializers.base import ArtifactInitializer
from model_config_harness.initializers.caffe2 import NetDefInitializer
from model_config_harness.initializers.custom import CustomInitializer
from model_config_harness.initializers.dispatch import PlatformInitializer
from model_config_harness.initializers.tensorflow import GraphDefInitializer, SavedModelInitializer
from model_config_harness.initializers.tensorrt import PlanInitializer

__all__ = [
    "ArtifactInitializer",
    "CustomInitializer",
    "GraphDefInitializer",
    "NetDefInitializer",
    "PlanInitializer",
    "PlatformInitializer",
    "SavedModelInitializer",
]
