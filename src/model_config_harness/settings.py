from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from model_config_harness.constants import (
    AUTOFILL_SANITY_PATH,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    MODEL_CONFIG_SANITY_PATH,
)


class HarnessSettings(BaseSettings):
    """
    Settings for golden runs, read from the process environment.

    ``test_root`` honours the ``TEST_SRCDIR`` variable set by test launchers,
    falling back to ``GOLDEN_TEST_ROOT`` and then the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="GOLDEN_", populate_by_name=True, extra="ignore", protected_namespaces=()
    )

    test_root: Path = Field(
        default_factory=Path.cwd,
        validation_alias=AliasChoices("TEST_SRCDIR", "GOLDEN_TEST_ROOT"),
    )
    config_filename: str = DEFAULT_CONFIG_FILENAME
    model_config_sanity_path: str = MODEL_CONFIG_SANITY_PATH
    autofill_sanity_path: str = AUTOFILL_SANITY_PATH
    log_level: str = DEFAULT_LOG_LEVEL
