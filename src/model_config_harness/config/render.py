from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.infrastructure.io import dumps_yaml


def render_config(config: ModelConfig) -> str:
    """
    Canonical text form of a model configuration.

    Fields appear in schema declaration order and empty values are omitted, so
    two equal configurations always render to the same string.
    """
    return dumps_yaml(config.to_pruned_dict())
