from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from model_config_harness.core.exceptions import GoldenMismatchError


class ValidationResult(BaseModel):
    """
    Outcome of one pipeline run.

    Attributes:
        rendered: Canonical rendering of the normalized config, empty on failure.
        error: Diagnostic of the first failing stage, empty on success.
    """

    model_config = ConfigDict(extra="forbid")

    rendered: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    @property
    def actual(self) -> str:
        """The text compared against golden files."""
        return self.rendered if self.ok else self.error


class ModelOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    model_name: str
    model_path: Path
    actual: str
    candidates: list[str] = Field(default_factory=list)
    failing_expected: str | None = None

    @property
    def passed(self) -> bool:
        return self.failing_expected is None


class RunReport(BaseModel):
    """Per-model pass/fail record of a golden run."""

    model_config = ConfigDict(extra="forbid")

    test_set: str
    outcomes: list[ModelOutcome] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> list[ModelOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    def merge(self, other: "RunReport") -> "RunReport":
        return RunReport(
            test_set=f"{self.test_set}+{other.test_set}",
            outcomes=[*self.outcomes, *other.outcomes],
        )

    def raise_for_failures(self) -> None:
        if self.failures:
            raise GoldenMismatchError([outcome.model_name for outcome in self.failures])

    def __str__(self) -> str:
        return (
            f"RunReport({self.test_set}: {len(self.outcomes) - len(self.failures)} passed, "
            f"{len(self.failures)} failed)"
        )
