import logging
from pathlib import Path

import typer

from model_config_harness.constants import EXPECTED_PREFIX
from model_config_harness.core.exceptions import ConfigRewriteError, DirectoryListingError
from model_config_harness.core.golden import GoldenTestRunner
from model_config_harness.core.pipeline import ConfigValidationPipeline
from model_config_harness.domain_models.results import RunReport
from model_config_harness.factory import create_initializer
from model_config_harness.infrastructure.logging import setup_logging
from model_config_harness.initializers import PlatformInitializer
from model_config_harness.interfaces.base_initializer import BaseInitializer
from model_config_harness.settings import HarnessSettings

app = typer.Typer(help="Golden-output validation of model serving configurations.")
logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, help="Logging level (DEBUG, INFO, WARNING, ERROR), defaults to GOLDEN_LOG_LEVEL"
    ),  # noqa: B008
    log_file: Path | None = typer.Option(None, help="Also write DEBUG logs to this file"),  # noqa: B008
) -> None:
    """
    Validate model repositories against their golden files.
    """
    try:
        setup_logging(log_level or HarnessSettings().log_level, log_file)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


@app.command()
def validate(
    model_path: Path = typer.Argument(..., help="Model directory to validate"),  # noqa: B008
    autofill: bool = typer.Option(False, "--autofill/--no-autofill", help="Derive unset fields"),  # noqa: B008
) -> None:
    """
    Run the validation pipeline on one model and print its rendered configuration.
    """
    result = ConfigValidationPipeline().validate_init(model_path, autofill, PlatformInitializer())
    if not result.ok:
        typer.echo(result.error, err=True)
        raise typer.Exit(code=1)
    typer.echo(result.rendered, nl=False)


@app.command()
def capture(
    model_path: Path = typer.Argument(..., help="Model directory to capture"),  # noqa: B008
    autofill: bool = typer.Option(False, "--autofill/--no-autofill", help="Derive unset fields"),  # noqa: B008
    name: str = typer.Option(EXPECTED_PREFIX, help="Golden file name, must start with 'expected'"),  # noqa: B008
) -> None:
    """
    Write the current pipeline output of a model as a golden file.
    """
    if not name.startswith(EXPECTED_PREFIX):
        typer.secho(f"Golden file name must start with '{EXPECTED_PREFIX}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = ConfigValidationPipeline().validate_init(model_path, autofill, PlatformInitializer())
    golden_path = model_path / name
    with golden_path.open("w", encoding="utf-8", newline="") as f:
        f.write(result.actual)
    logger.info(f"Captured {golden_path}")
    typer.secho(f"Captured {golden_path}", fg=typer.colors.GREEN)


@app.command()
def run(
    test_set: str = typer.Argument(..., help="Test set path, relative to the test root"),  # noqa: B008
    autofill: bool = typer.Option(False, "--autofill/--no-autofill", help="Derive unset fields"),  # noqa: B008
    platform: str = typer.Option("", help="Force this platform into every model config"),  # noqa: B008
    test_root: Path | None = typer.Option(None, help="Override the test root (TEST_SRCDIR)"),  # noqa: B008
) -> None:
    """
    Run one golden test set. Rewrites fixture configs in place when --platform is given.
    """
    runner = GoldenTestRunner(settings=_settings(test_root))
    init_func = _initializer(platform)
    try:
        report = runner.validate_one(test_set, autofill, platform, init_func)
    except (DirectoryListingError, ConfigRewriteError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from e
    _finish(report)


@app.command("run-all")
def run_all(
    platform: str = typer.Argument(..., help="Platform forced into the model config sanity set"),  # noqa: B008
    test_root: Path | None = typer.Option(None, help="Override the test root (TEST_SRCDIR)"),  # noqa: B008
) -> None:
    """
    Run the model config sanity set and the autofill sanity set.
    """
    runner = GoldenTestRunner(settings=_settings(test_root))
    init_func = _initializer(platform)
    try:
        report = runner.validate_all(platform, init_func)
    except (DirectoryListingError, ConfigRewriteError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from e
    _finish(report)


def _settings(test_root: Path | None) -> HarnessSettings:
    if test_root is None:
        return HarnessSettings()
    return HarnessSettings(test_root=test_root)


def _initializer(platform: str) -> BaseInitializer:
    """
    Initializer dispatching on each model's declared platform.

    A forced platform must be known; once it is written into the fixtures the
    dispatcher resolves to that platform's initializer.
    """
    if platform:
        try:
            create_initializer(platform)
        except ValueError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from e
    return PlatformInitializer()


def _finish(report: RunReport) -> None:
    for outcome in report.failures:
        typer.secho(f"FAILED {outcome.model_name}", fg=typer.colors.RED)
    typer.echo(str(report))
    if not report.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
