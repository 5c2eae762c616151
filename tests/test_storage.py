from pathlib import Path

import pytest
import yaml

from model_config_harness.domain_models import ModelConfig
from model_config_harness.infrastructure.io import dump_yaml, dumps_yaml, load_yaml
from model_config_harness.infrastructure.storage import LocalStorage


def test_load_yaml(tmp_path: Path) -> None:
    path = tmp_path / "data.yaml"
    path.write_text("b: 1\na: [x, y]\n")
    assert load_yaml(path) == {"b": 1, "a": ["x", "y"]}


def test_load_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_yaml(path) == {}


def test_load_yaml_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError, match="list.yaml must contain a mapping, got list"):
        load_yaml(path)


def test_load_yaml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_invalid(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("a: [1, 2\n")
    with pytest.raises(yaml.YAMLError):
        load_yaml(path)


def test_dump_keeps_key_order(tmp_path: Path) -> None:
    path = tmp_path / "out.yaml"
    dump_yaml({"z": 1, "a": {"y": 2, "b": 3}}, path)
    assert path.read_text() == "z: 1\na:\n  y: 2\n  b: 3\n"
    assert dumps_yaml({"z": 1, "a": 2}) == "z: 1\na: 2\n"


def test_local_storage_listing(tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()
    (tmp_path / "file").touch()
    storage = LocalStorage()

    assert sorted(storage.list_children(tmp_path)) == ["dir", "file"]
    assert storage.is_dir(tmp_path / "dir")
    assert not storage.is_dir(tmp_path / "file")
    assert storage.exists(tmp_path / "file")
    assert not storage.exists(tmp_path / "other")
    with pytest.raises(OSError):
        storage.list_children(tmp_path / "other")


def test_local_storage_reads_bytes_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "expected"
    path.write_bytes(b"line one\r\nline two\xff")
    assert LocalStorage().read_bytes(path) == b"line one\r\nline two\xff"


def test_local_storage_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    config = ModelConfig(name="m", platform="custom", max_batch_size=8)
    storage = LocalStorage()

    storage.write_config(path, config)

    assert path.read_text() == "name: m\nplatform: custom\nmax_batch_size: 8\n"
    assert storage.read_config(path) == config


def test_load_yaml_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"name: \xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        load_yaml(path)


def test_dump_yaml_writes_utf8(tmp_path: Path) -> None:
    path = tmp_path / "out.yaml"
    dump_yaml({"label": "café"}, path)
    assert load_yaml(path) == {"label": "café"}
