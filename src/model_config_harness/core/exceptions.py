class HarnessError(Exception):
    """Base exception for the golden harness."""


class NormalizationError(HarnessError):
    """Model configuration could not be normalized."""


class ValidationError(HarnessError):
    """Normalized configuration violates platform schema rules."""


class InitializationError(HarnessError):
    """Platform initializer rejected the model version artifacts."""


class DirectoryListingError(HarnessError):
    """A fixture directory could not be listed. Fatal to the whole run."""


class ConfigRewriteError(HarnessError):
    """A platform override could not be written back. Fatal to the whole run."""


class GoldenMismatchError(HarnessError):
    """One or more models did not match any of their expected golden files."""

    def __init__(self, model_names: list[str]) -> None:
        self.model_names = model_names
        super().__init__(
            f"{len(model_names)} model(s) did not match their golden files: "
            + ", ".join(model_names)
        )
