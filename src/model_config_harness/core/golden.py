"""
Golden-file test runner.

Every model directory of a test set is pushed through the
``ConfigValidationPipeline`` and its output compared with the ``expected*``
files stored next to it. A model passes when any candidate matches, where a
candidate shorter than the output only has to match the output's prefix.
Comparison is on bytes: the output is UTF-8 encoded and goldens are read
undecoded, so a golden that is not valid UTF-8 is a plain mismatch.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import AnyStr

import yaml
from pydantic import ValidationError as PydanticValidationError

from model_config_harness.constants import EXPECTED_PREFIX
from model_config_harness.core.exceptions import ConfigRewriteError, DirectoryListingError
from model_config_harness.core.pipeline import ConfigValidationPipeline
from model_config_harness.domain_models.results import ModelOutcome, RunReport
from model_config_harness.infrastructure.storage import LocalStorage
from model_config_harness.interfaces.base_initializer import InitFunc
from model_config_harness.interfaces.storage import BaseStorage
from model_config_harness.settings import HarnessSettings

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[/\\]")


def truncated_match(expected: AnyStr, actual: AnyStr) -> bool:
    """
    Whether ``expected`` matches ``actual``, allowing the expectation to stop early.

    Only the expectation may be shorter: a longer expectation must equal
    ``actual`` exactly and therefore never matches.
    """
    if len(expected) < len(actual):
        return expected == actual[: len(expected)]
    return expected == actual


def select_failing_expectation(expectations: Iterable[AnyStr], actual: AnyStr) -> AnyStr | None:
    """
    Compare ``actual`` with each expectation in turn.

    Returns None as soon as one matches (later ones are not consumed), otherwise
    the last expectation examined. No expectations at all also returns None.
    """
    failing: AnyStr | None = None
    for expected in expectations:
        if truncated_match(expected, actual):
            return None
        failing = expected
    return failing


def golden_name(child: str) -> str:
    """Entry name up to the first path separator."""
    return _SEPARATORS.split(child, maxsplit=1)[0]


def find_golden_candidates(storage: BaseStorage, model_path: Path) -> list[str]:
    """
    Names of the ``expected*`` entries of a model directory, in listing order.

    A model directory that cannot be listed has no candidates.
    """
    try:
        children = storage.list_children(model_path)
    except OSError as e:
        logger.debug(f"Cannot list {model_path}: {e}")
        return []
    return [
        name for name in (golden_name(child) for child in children) if name.startswith(EXPECTED_PREFIX)
    ]


def apply_platform_override(storage: BaseStorage, config_path: Path, platform: str) -> bool:
    """
    Rewrite the platform of the configuration file at ``config_path`` in place.

    Returns:
        False when there is no configuration file, True once it has been rewritten.

    Raises:
        ConfigRewriteError: If the file cannot be read, parsed or written back.
    """
    if not storage.exists(config_path):
        return False

    try:
        config = storage.read_config(config_path)
        config.platform = platform
        storage.write_config(config_path, config)
    except (OSError, TypeError, UnicodeDecodeError, yaml.YAMLError, PydanticValidationError) as e:
        msg = f"Unable to apply platform override '{platform}' to {config_path}: {e}"
        raise ConfigRewriteError(msg) from e

    logger.debug(f"Set platform of {config_path} to '{platform}'")
    return True


class GoldenTestRunner:
    """Run golden comparisons over the model directories of one or more test sets."""

    def __init__(
        self,
        settings: HarnessSettings | None = None,
        storage: BaseStorage | None = None,
        pipeline: ConfigValidationPipeline | None = None,
    ) -> None:
        self.settings = settings or HarnessSettings()
        self.storage = storage or LocalStorage()
        self.pipeline = pipeline or ConfigValidationPipeline(
            storage=self.storage, config_filename=self.settings.config_filename
        )

    def validate_all(self, platform: str, init_func: InitFunc) -> RunReport:
        """
        Run both sanity test sets.

        The model config set runs without autofill and with ``platform`` forced,
        the autofill set with autofill and no platform override.
        """
        sanity = self.validate_one(
            self.settings.model_config_sanity_path,
            autofill=False,
            platform=platform,
            init_func=init_func,
        )
        autofill = self.validate_one(
            self.settings.autofill_sanity_path,
            autofill=True,
            platform="",
            init_func=init_func,
        )
        return sanity.merge(autofill)

    def validate_one(
        self,
        test_set_path: str,
        autofill: bool,
        platform: str | None,
        init_func: InitFunc,
    ) -> RunReport:
        """
        Run every model directory found under ``<test_root>/<test_set_path>``.

        Model failures are recorded in the report and do not stop the run.

        Raises:
            DirectoryListingError: If the test set directory cannot be listed.
            ConfigRewriteError: If a platform override cannot be written back.
        """
        base_path = self.settings.test_root / test_set_path

        try:
            models = self.storage.list_children(base_path)
        except OSError as e:
            msg = f"Unable to list test set {base_path}: {e}"
            raise DirectoryListingError(msg) from e

        report = RunReport(test_set=test_set_path)
        for model_name in models:
            model_path = base_path / model_name

            # Destructive: the fixture's config file is rewritten in place.
            if platform:
                apply_platform_override(
                    self.storage, model_path / self.settings.config_filename, platform
                )

            logger.info(f"Testing {model_name}")
            actual = self.pipeline.validate_init(model_path, autofill, init_func).actual

            outcome = self._compare(model_name, model_path, actual)
            if not outcome.passed:
                logger.error(f"Expected:\n{outcome.failing_expected}")
                logger.error(f"Actual:\n{actual}")
            report.outcomes.append(outcome)

        logger.info(str(report))
        return report

    def _compare(self, model_name: str, model_path: Path, actual: str) -> ModelOutcome:
        # Goldens are compared as raw bytes; the report keeps a readable decoding.
        examined: list[str] = []
        failing = select_failing_expectation(
            self._read_candidates(model_path, examined), actual.encode("utf-8")
        )
        return ModelOutcome(
            model_name=model_name,
            model_path=model_path,
            actual=actual,
            candidates=examined,
            failing_expected=(
                None if failing is None else failing.decode("utf-8", errors="replace")
            ),
        )

    def _read_candidates(self, model_path: Path, examined: list[str]) -> Iterator[bytes]:
        """
        Lazily read the golden candidates of a model, so nothing past the first match is read.

        Directories and unreadable files are skipped rather than compared. A
        directory candidate therefore never makes a model pass on its own, unlike
        reading it as an empty golden would.
        """
        for name in find_golden_candidates(self.storage, model_path):
            expected_path = model_path / name
            if self.storage.is_dir(expected_path):
                logger.warning(f"Skipping {expected_path}: not a file")
                continue
            logger.info(f"Comparing with {expected_path}")
            try:
                expected = self.storage.read_bytes(expected_path)
            except OSError as e:
                logger.warning(f"Skipping {expected_path}: {e}")
                continue
            examined.append(name)
            yield expected
