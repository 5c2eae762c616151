from pathlib import Path

import pytest

from model_config_harness.core.exceptions import InitializationError
from model_config_harness.domain_models import ModelConfig
from model_config_harness.initializers import (
    CustomInitializer,
    GraphDefInitializer,
    NetDefInitializer,
    PlanInitializer,
    PlatformInitializer,
    SavedModelInitializer,
)
from tests.common import MakeModel


def _config(platform: str, filename: str, name: str = "m") -> ModelConfig:
    return ModelConfig(name=name, platform=platform, default_model_filename=filename)


@pytest.mark.parametrize(
    ("initializer", "platform", "artifacts", "filename"),
    [
        (GraphDefInitializer(), "tensorflow_graphdef", ("model.graphdef",), "model.graphdef"),
        (
            SavedModelInitializer(),
            "tensorflow_savedmodel",
            ("model.savedmodel/saved_model.pb",),
            "model.savedmodel",
        ),
        (NetDefInitializer(), "caffe2_netdef", ("model.netdef", "init_model.netdef"), "model.netdef"),
        (PlanInitializer(), "tensorrt_plan", ("model.plan",), "model.plan"),
        (CustomInitializer(), "custom", ("libcustom.so",), "libcustom.so"),
    ],
)
def test_initializer_accepts_complete_version(
    make_model: MakeModel, initializer, platform: str, artifacts: tuple[str, ...], filename: str
) -> None:
    model = make_model("m", artifacts=artifacts)
    assert initializer.platform == platform
    initializer(model / "1", _config(platform, filename))


def test_platform_mismatch(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.plan",))
    with pytest.raises(InitializationError) as excinfo:
        GraphDefInitializer().initialize(model / "1", _config("tensorrt_plan", "model.plan"))
    assert str(excinfo.value) == (
        "model 'm' version 1: initializer for 'tensorflow_graphdef' cannot load platform 'tensorrt_plan'"
    )


def test_missing_version_directory(tmp_path: Path) -> None:
    with pytest.raises(InitializationError, match="version directory not found"):
        PlanInitializer().initialize(tmp_path / "m" / "1", _config("tensorrt_plan", "model.plan"))


def test_missing_model_file(make_model: MakeModel) -> None:
    model = make_model("m")
    with pytest.raises(InitializationError) as excinfo:
        GraphDefInitializer().initialize(model / "1", _config("tensorflow_graphdef", "model.graphdef"))
    message = str(excinfo.value)
    assert message == "model 'm' version 1: expected model file 'model.graphdef'"
    assert str(model) not in message


def test_configured_filename_is_used(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("frozen.pb",))
    GraphDefInitializer().initialize(model / "1", _config("tensorflow_graphdef", "frozen.pb"))


def test_savedmodel_must_be_directory(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.savedmodel",))
    with pytest.raises(InitializationError, match="expected model directory 'model.savedmodel'"):
        SavedModelInitializer().initialize(
            model / "1", _config("tensorflow_savedmodel", "model.savedmodel")
        )


def test_savedmodel_without_proto(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.savedmodel/variables/",))
    with pytest.raises(InitializationError) as excinfo:
        SavedModelInitializer().initialize(
            model / "1", _config("tensorflow_savedmodel", "model.savedmodel")
        )
    assert str(excinfo.value) == (
        "model 'm' version 1: saved model 'model.savedmodel' has no saved_model.pb"
    )


def test_netdef_requires_init_net(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.netdef",))
    with pytest.raises(InitializationError, match="expected init file 'init_model.netdef'"):
        NetDefInitializer().initialize(model / "1", _config("caffe2_netdef", "model.netdef"))


def test_netdef_custom_init_filename(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.netdef", "warmup.netdef"))
    NetDefInitializer(init_filename="warmup.netdef").initialize(
        model / "1", _config("caffe2_netdef", "model.netdef")
    )


def test_custom_requires_shared_library(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("backend.bin",))
    with pytest.raises(InitializationError, match="custom backend 'backend.bin' is not a shared library"):
        CustomInitializer().initialize(model / "1", _config("custom", "backend.bin"))


def test_dispatch_routes_on_declared_platform(make_model: MakeModel) -> None:
    model = make_model("m", artifacts=("model.plan",))
    PlatformInitializer()(model / "1", _config("tensorrt_plan", "model.plan"))
    with pytest.raises(InitializationError, match="expected model file 'model.graphdef'"):
        PlatformInitializer()(model / "1", _config("tensorflow_graphdef", "model.graphdef"))


def test_dispatch_unknown_platform(make_model: MakeModel) -> None:
    model = make_model("m")
    with pytest.raises(InitializationError) as excinfo:
        PlatformInitializer()(model / "1", _config("onnxruntime_onnx", "model.onnx"))
    assert str(excinfo.value) == "model 'm': Unknown platform: 'onnxruntime_onnx'"


def test_initializer_str() -> None:
    assert str(PlanInitializer()) == "PlanInitializer(tensorrt_plan)"
    assert repr(CustomInitializer()) == "<CustomInitializer(platform=custom)>"
