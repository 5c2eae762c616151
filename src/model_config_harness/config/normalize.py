"""
Normalization of on-disk model configurations.

Turns the optional configuration file of a model directory into a complete
``ModelConfig``: fields that can be derived from the model directory are
autofilled on request, and platform defaults from the ``PlatformRegistry`` are
applied to whatever the configuration leaves unset.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from model_config_harness.constants import DEFAULT_CONFIG_FILENAME
from model_config_harness.core.exceptions import NormalizationError
from model_config_harness.domain_models.enums import InstanceKind
from model_config_harness.domain_models.model_config import (
    LatestVersionPolicy,
    ModelConfig,
    ModelInstanceGroup,
    ModelVersionPolicy,
)
from model_config_harness.domain_models.platform import BaseAdapterConfig, PlatformRegistry
from model_config_harness.infrastructure.storage import LocalStorage
from model_config_harness.interfaces.storage import BaseStorage

logger = logging.getLogger(__name__)


def get_normalized_model_config(
    model_path: Path,
    registry: PlatformRegistry,
    autofill: bool,
    storage: BaseStorage | None = None,
    config_filename: str = DEFAULT_CONFIG_FILENAME,
) -> ModelConfig:
    """
    Build the normalized configuration of the model stored at ``model_path``.

    Args:
        model_path: Model directory holding the config file and version directories.
        registry: Known platforms and their default adapter configs.
        autofill: Derive ``name`` and ``platform`` from the model directory when unset.
        storage: Filesystem access, local disk by default.
        config_filename: Name of the configuration file inside ``model_path``.

    Returns:
        The normalized configuration.

    Raises:
        NormalizationError: If no consistent configuration can be resolved.
    """
    storage = storage or LocalStorage()
    model_name = model_path.name

    config = _load_config(storage, model_path / config_filename, model_name, autofill)

    if autofill:
        _autofill(config, model_path, registry, storage)
    else:
        if not config.name:
            msg = f"model '{model_name}': configuration must specify 'name'"
            raise NormalizationError(msg)
        if not config.platform:
            msg = f"model '{config.name}': configuration must specify 'platform'"
            raise NormalizationError(msg)

    adapter = registry.get(config.platform)
    if adapter is None:
        # Left for validation to reject.
        logger.debug(f"No adapter config for platform '{config.platform}', skipping defaults")
    else:
        _apply_defaults(config, adapter)

    return config


def _load_config(
    storage: BaseStorage, config_path: Path, model_name: str, autofill: bool
) -> ModelConfig:
    if not storage.exists(config_path):
        if autofill:
            logger.debug(f"No {config_path.name} for '{model_name}', autofilling from scratch")
            return ModelConfig()
        msg = (
            f"model '{model_name}': configuration file '{config_path.name}' not found "
            "and autofill is disabled"
        )
        raise NormalizationError(msg)

    try:
        return storage.read_config(config_path)
    except PydanticValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise _parse_error(model_name, config_path, reason) from e
    except yaml.YAMLError as e:
        raise _parse_error(model_name, config_path, describe_yaml_error(e)) from e
    except (OSError, TypeError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise _parse_error(model_name, config_path, reason) from e


def _parse_error(model_name: str, config_path: Path, reason: str) -> NormalizationError:
    msg = f"model '{model_name}': unable to parse configuration file '{config_path.name}': {reason}"
    return NormalizationError(msg)


def describe_yaml_error(error: yaml.YAMLError) -> str:
    """Summarize a YAML error without the file path PyYAML embeds in its message."""
    if isinstance(error, yaml.MarkedYAMLError) and error.problem:
        if error.problem_mark is not None:
            return f"{error.problem} (line {error.problem_mark.line + 1})"
        return str(error.problem)
    return error.__class__.__name__


def _autofill(
    config: ModelConfig, model_path: Path, registry: PlatformRegistry, storage: BaseStorage
) -> None:
    if not config.name:
        config.name = model_path.name
    elif config.name != model_path.name:
        msg = (
            f"model '{model_path.name}': configuration name '{config.name}' "
            "does not match the model directory"
        )
        raise NormalizationError(msg)

    detected = detect_platforms(model_path, registry, storage)

    if not config.platform:
        if not detected:
            msg = (
                f"model '{config.name}': unable to autofill platform, "
                "no recognized model artifacts found"
            )
            raise NormalizationError(msg)
        if len(detected) > 1:
            msg = (
                f"model '{config.name}': unable to autofill platform, "
                f"artifacts match multiple platforms: {', '.join(detected)}"
            )
            raise NormalizationError(msg)
        config.platform = detected[0]
        logger.debug(f"Autofilled platform '{config.platform}' for '{config.name}'")
    elif len(detected) == 1 and config.platform not in detected:
        msg = (
            f"model '{config.name}': declared platform '{config.platform}' "
            f"conflicts with detected platform '{detected[0]}'"
        )
        raise NormalizationError(msg)


def detect_platforms(
    model_path: Path, registry: PlatformRegistry, storage: BaseStorage
) -> list[str]:
    """
    Platforms whose default model artifact appears in any numbered version directory.

    Returned in registry order.

    Raises:
        NormalizationError: If the model directory cannot be listed.
    """
    try:
        children = storage.list_children(model_path)
    except OSError as e:
        msg = f"model '{model_path.name}': unable to list model directory: {e.strerror or e}"
        raise NormalizationError(msg) from e

    version_dirs = [
        model_path / child
        for child in children
        if child.isdigit() and storage.is_dir(model_path / child)
    ]

    detected = []
    for platform in registry.platforms():
        adapter = registry.get(platform)
        if adapter is None:
            continue
        if any(storage.exists(v / adapter.default_model_filename) for v in version_dirs):
            detected.append(platform)
    return detected


def _apply_defaults(config: ModelConfig, adapter: BaseAdapterConfig) -> None:
    if config.version_policy is None or not config.version_policy.kinds():
        config.version_policy = ModelVersionPolicy(latest=LatestVersionPolicy(num_versions=1))

    if not config.default_model_filename:
        config.default_model_filename = adapter.default_model_filename

    if not config.instance_group:
        config.instance_group = [ModelInstanceGroup()]

    for index, group in enumerate(config.instance_group):
        if not group.name:
            group.name = f"{config.name}_{index}"
        if group.count == 0:
            group.count = 1
        if group.kind is None:
            group.kind = InstanceKind.KIND_GPU if group.gpus else adapter.default_instance_kind
