from collections.abc import Sequence

from model_config_harness.core.exceptions import ValidationError
from model_config_harness.domain_models.enums import DataType, InstanceKind, Platform, TensorFormat
from model_config_harness.domain_models.model_config import ModelConfig, ModelInput, ModelOutput

KNOWN_PLATFORMS = frozenset(p.value for p in Platform)

# Image formats describe a single CHW/HWC tensor, batch dimension excluded
IMAGE_FORMATS = frozenset({TensorFormat.FORMAT_NHWC, TensorFormat.FORMAT_NCHW})


def validate_model_config(config: ModelConfig, expected_name: str = "") -> None:
    """
    Check a normalized configuration against the platform schema rules.

    Args:
        config: Normalized model configuration. Not modified.
        expected_name: When non-empty, the name the configuration must carry.

    Raises:
        ValidationError: On the first rule the configuration violates.
    """
    if not config.name:
        msg = "model configuration must specify 'name'"
        raise ValidationError(msg)

    if expected_name and config.name != expected_name:
        _fail(config, f"name does not match expected model name '{expected_name}'")

    if not config.platform:
        _fail(config, "must specify 'platform'")
    if config.platform not in KNOWN_PLATFORMS:
        _fail(config, f"unknown platform '{config.platform}'")

    if config.max_batch_size < 0:
        _fail(config, f"'max_batch_size' must be non-negative, got {config.max_batch_size}")

    _validate_version_policy(config)

    if not config.input:
        _fail(config, "must specify at least one 'input'")
    if not config.output:
        _fail(config, "must specify at least one 'output'")

    _validate_tensors(config, "input", config.input)
    _validate_tensors(config, "output", config.output)

    for tensor in config.input:
        if tensor.format in IMAGE_FORMATS and len(tensor.dims) != 3:
            _fail(
                config,
                f"input '{tensor.name}' has format {tensor.format.value} "
                f"which requires 3 dims, got {len(tensor.dims)}",
            )

    _validate_instance_groups(config)


def _fail(config: ModelConfig, reason: str) -> None:
    msg = f"model '{config.name}': {reason}"
    raise ValidationError(msg)


def _validate_version_policy(config: ModelConfig) -> None:
    policy = config.version_policy
    if policy is None:
        _fail(config, "must specify 'version_policy'")
        return

    kinds = policy.kinds()
    if len(kinds) != 1:
        _fail(config, "'version_policy' must set exactly one of 'latest', 'all' or 'specific'")

    if policy.latest is not None and policy.latest.num_versions < 1:
        _fail(config, "'version_policy.latest.num_versions' must be at least 1")

    if policy.specific is not None:
        if not policy.specific.versions:
            _fail(config, "'version_policy.specific' must list at least one version")
        negative = [v for v in policy.specific.versions if v < 0]
        if negative:
            _fail(config, f"'version_policy.specific' has negative versions {negative}")


def _validate_tensors(
    config: ModelConfig, kind: str, tensors: Sequence[ModelInput | ModelOutput]
) -> None:
    seen: set[str] = set()
    for tensor in tensors:
        if not tensor.name:
            _fail(config, f"every {kind} must specify 'name'")
        if tensor.name in seen:
            _fail(config, f"duplicate {kind} name '{tensor.name}'")
        seen.add(tensor.name)

        if tensor.data_type == DataType.TYPE_INVALID:
            _fail(config, f"{kind} '{tensor.name}' must specify 'data_type'")
        if not tensor.dims:
            _fail(config, f"{kind} '{tensor.name}' must specify 'dims'")

        for dim in tensor.dims:
            if dim == -1:
                if config.platform == Platform.TENSORRT_PLAN:
                    _fail(
                        config,
                        f"{kind} '{tensor.name}' has a variable-size dimension, "
                        f"not supported for {Platform.TENSORRT_PLAN.value}",
                    )
            elif dim < 1:
                _fail(config, f"{kind} '{tensor.name}' dimension {dim} must be positive or -1")


def _validate_instance_groups(config: ModelConfig) -> None:
    for group in config.instance_group:
        if group.count < 1:
            _fail(config, f"instance group '{group.name}' must have 'count' of at least 1")
        if group.kind == InstanceKind.KIND_CPU:
            if group.gpus:
                _fail(config, f"instance group '{group.name}' is KIND_CPU but lists 'gpus'")
            if config.platform == Platform.TENSORRT_PLAN:
                _fail(
                    config,
                    f"instance group '{group.name}' is KIND_CPU, "
                    f"not supported for {Platform.TENSORRT_PLAN.value}",
                )
