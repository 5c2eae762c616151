import functools
import logging
from collections.abc import Callable
from pathlib import Path

from model_config_harness.config.normalize import get_normalized_model_config
from model_config_harness.config.render import render_config
from model_config_harness.config.validate import validate_model_config
from model_config_harness.constants import DEFAULT_CONFIG_FILENAME, VERSION_UNDER_TEST
from model_config_harness.core.exceptions import (
    InitializationError,
    NormalizationError,
    ValidationError,
)
from model_config_harness.domain_models.model_config import ModelConfig
from model_config_harness.domain_models.platform import PlatformRegistry, build_platform_registry
from model_config_harness.domain_models.results import ValidationResult
from model_config_harness.interfaces.base_initializer import InitFunc
from model_config_harness.interfaces.storage import BaseStorage

logger = logging.getLogger(__name__)

Normalizer = Callable[[Path, PlatformRegistry, bool], ModelConfig]
Validator = Callable[[ModelConfig, str], None]


class ConfigValidationPipeline:
    """
    Normalize, validate and initialize one model directory.

    Each stage can fail; the first failure ends the run and its diagnostic
    becomes the result. Stage errors never propagate out of ``validate_init``.
    """

    def __init__(
        self,
        normalizer: Normalizer | None = None,
        validator: Validator | None = None,
        registry_factory: Callable[[], PlatformRegistry] = build_platform_registry,
        storage: BaseStorage | None = None,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
    ) -> None:
        self.normalizer: Normalizer = normalizer or functools.partial(
            get_normalized_model_config, storage=storage, config_filename=config_filename
        )
        self.validator: Validator = validator or validate_model_config
        self.registry_factory = registry_factory

    def validate_init(
        self, model_path: Path, autofill: bool, init_func: InitFunc
    ) -> ValidationResult:
        """
        Run the pipeline over ``model_path``.

        Args:
            model_path: Model directory under test.
            autofill: Whether normalization may derive unset fields.
            init_func: Platform initializer, called with ``<model_path>/1``.

        Returns:
            The rendered configuration on success, or the error of the failing stage.
        """
        registry = self.registry_factory()

        try:
            config = self.normalizer(model_path, registry, autofill)
            self.validator(config, "")
            version_path = model_path / VERSION_UNDER_TEST
            self._initialize(init_func, version_path, config)
        except (NormalizationError, ValidationError, InitializationError) as e:
            logger.debug(f"{model_path.name}: {e.__class__.__name__}: {e}")
            return ValidationResult(error=f"{e.__class__.__name__}: {e}")

        return ValidationResult(rendered=render_config(config))

    @staticmethod
    def _initialize(init_func: InitFunc, version_path: Path, config: ModelConfig) -> None:
        try:
            init_func(version_path, config)
        except InitializationError:
            raise
        except Exception as e:
            msg = f"model '{config.name}': initializer failed: {e}"
            raise InitializationError(msg) from e


def validate_init(model_path: Path, autofill: bool, init_func: InitFunc) -> ValidationResult:
    """Run a default ``ConfigValidationPipeline`` once."""
    return ConfigValidationPipeline().validate_init(model_path, autofill, init_func)
