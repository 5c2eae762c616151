from abc import ABC, abstractmethod
from pathlib import Path

from model_config_harness.domain_models.model_config import ModelConfig


class BaseStorage(ABC):
    """
    Filesystem primitives used by normalization and the golden runner.

    Implementations raise ``OSError`` (or a subclass) on I/O failure and leave
    the conversion into harness errors to the caller.
    """

    @abstractmethod
    def list_children(self, path: Path) -> list[str]:
        """Names of the immediate children of ``path``, in listing order."""
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool: ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool: ...

    @abstractmethod
    def read_config(self, path: Path) -> ModelConfig:
        """
        Parse a structured configuration file.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the content does not fit the schema.
        """
        ...

    @abstractmethod
    def write_config(self, path: Path, config: ModelConfig) -> None: ...

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Raw content of a file, undecoded."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
