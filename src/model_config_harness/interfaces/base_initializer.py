from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from model_config_harness.domain_models.model_config import ModelConfig

# Initializer contract: raise InitializationError when the artifacts under the
# version path do not fit the configuration.
InitFunc = Callable[[Path, ModelConfig], None]


class BaseInitializer(ABC):
    """
    Platform-specific check of a model version against its configuration.

    Instances are callables, so they can be passed anywhere an ``InitFunc`` is
    expected.
    """

    @property
    @abstractmethod
    def platform(self) -> str:
        """Platform handled by this initializer."""
        ...

    @abstractmethod
    def initialize(self, version_path: Path, config: ModelConfig) -> None:
        """
        Check the artifacts of one model version.

        Args:
            version_path: Directory of the model version, e.g. ``<model>/1``.
            config: Normalized and validated model configuration.

        Raises:
            InitializationError: If the artifacts do not fit the configuration.
        """
        ...

    def __call__(self, version_path: Path, config: ModelConfig) -> None:
        self.initialize(version_path, config)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(platform={self.platform})>"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.platform})"
