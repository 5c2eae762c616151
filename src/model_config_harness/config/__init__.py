from model_config_harness.config.normalize import detect_platforms, get_normalized_model_config
from model_config_harness.config.render import render_config
from model_config_harness.config.validate import validate_model_config

__all__ = [
    "detect_platforms",
    "get_normalized_model_config",
    "render_config",
    "validate_model_config",
]
