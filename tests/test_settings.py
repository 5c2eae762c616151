from pathlib import Path

import pytest

from model_config_harness.settings import HarnessSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEST_SRCDIR", "GOLDEN_TEST_ROOT", "GOLDEN_LOG_LEVEL", "GOLDEN_CONFIG_FILENAME"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = HarnessSettings()
    assert settings.test_root == tmp_path
    assert settings.config_filename == "config.yaml"
    assert settings.model_config_sanity_path == "testdata/model_config_sanity"
    assert settings.autofill_sanity_path == "testdata/autofill_sanity"
    assert settings.log_level == "INFO"


def test_test_srcdir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEST_SRCDIR", str(tmp_path))
    assert HarnessSettings().test_root == tmp_path


def test_test_srcdir_takes_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEST_SRCDIR", str(tmp_path / "a"))
    monkeypatch.setenv("GOLDEN_TEST_ROOT", str(tmp_path / "b"))
    assert HarnessSettings().test_root == tmp_path / "a"


def test_golden_test_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GOLDEN_TEST_ROOT", str(tmp_path))
    assert HarnessSettings().test_root == tmp_path


def test_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOLDEN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GOLDEN_AUTOFILL_SANITY_PATH", "fixtures/autofill")
    settings = HarnessSettings()
    assert settings.log_level == "DEBUG"
    assert settings.autofill_sanity_path == "fixtures/autofill"


def test_explicit_values_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEST_SRCDIR", "/elsewhere")
    assert HarnessSettings(test_root=tmp_path).test_root == tmp_path
