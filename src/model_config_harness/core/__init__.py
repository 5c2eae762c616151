from model_config_harness.core.exceptions import (
    ConfigRewriteError,
    DirectoryListingError,
    GoldenMismatchError,
    HarnessError,
    InitializationError,
    NormalizationError,
    ValidationError,
)

__all__ = [
    "ConfigRewriteError",
    "DirectoryListingError",
    "GoldenMismatchError",
    "HarnessError",
    "InitializationError",
    "NormalizationError",
    "ValidationError",
]
