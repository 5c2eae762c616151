"""
model-config-harness: golden-output validation for model serving configurations.

A model repository fixture is a directory of models, each holding an optional
``config.yaml``, a ``1/`` version directory and any number of ``expected*``
golden files. Every model is normalized, validated against its platform's
rules and checked by a platform initializer; the rendered configuration (or
the diagnostic of the failing stage) must match one of the golden files.

Usage
-----
    $ golden-harness run testdata/model_config_sanity --platform tensorflow_graphdef

or programmatically:

    from model_config_harness import GoldenTestRunner
    from model_config_harness.initializers import PlatformInitializer

    report = GoldenTestRunner().validate_all("tensorflow_graphdef", PlatformInitializer())
    report.raise_for_failures()
"""

from model_config_harness.core.golden import GoldenTestRunner
from model_config_harness.core.pipeline import ConfigValidationPipeline, validate_init
from model_config_harness.domain_models import ModelConfig, RunReport, ValidationResult
from model_config_harness.settings import HarnessSettings

__all__ = [
    "ConfigValidationPipeline",
    "GoldenTestRunner",
    "HarnessSettings",
    "ModelConfig",
    "RunReport",
    "ValidationResult",
    "validate_init",
]
