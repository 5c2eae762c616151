from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from model_config_harness.domain_models.enums import DataType, InstanceKind, TensorFormat


class LatestVersionPolicy(BaseModel):
    model_config = ConfigDict(extra="forbid")

    num_versions: int = 0


class AllVersionPolicy(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SpecificVersionPolicy(BaseModel):
    model_config = ConfigDict(extra="forbid")

    versions: list[int] = Field(default_factory=list)


class ModelVersionPolicy(BaseModel):
    """
    Which versions of a model are served.

    Exactly one of ``latest``, ``all`` or ``specific`` is expected to be set.
    The one-of rule is enforced by validation, not parsing.
    """

    model_config = ConfigDict(extra="forbid")

    latest: LatestVersionPolicy | None = None
    all: AllVersionPolicy | None = None
    specific: SpecificVersionPolicy | None = None

    def kinds(self) -> list[str]:
        return [k for k in ("latest", "all", "specific") if getattr(self, k) is not None]


class ModelInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    data_type: DataType = DataType.TYPE_INVALID
    format: TensorFormat = TensorFormat.FORMAT_NONE
    dims: list[int] = Field(default_factory=list)


class ModelOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    data_type: DataType = DataType.TYPE_INVALID
    dims: list[int] = Field(default_factory=list)
    label_filename: str = ""


class ModelInstanceGroup(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = ""
    count: int = 0
    kind: InstanceKind | None = None
    gpus: list[int] = Field(default_factory=list)


class ModelConfig(BaseModel):
    """
    Serving configuration of one model.

    Every field defaults to an empty value so that incomplete fixtures still
    load; normalization fills what it can and validation rejects the rest.
    Field declaration order is the canonical rendering order.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    platform: str = ""
    version_policy: ModelVersionPolicy | None = None
    max_batch_size: int = 0
    input: list[ModelInput] = Field(default_factory=list)
    output: list[ModelOutput] = Field(default_factory=list)
    instance_group: list[ModelInstanceGroup] = Field(default_factory=list)
    default_model_filename: str = ""
    parameters: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Path) -> "ModelConfig":
        """Load a model configuration from a YAML file."""
        from model_config_harness.infrastructure import io

        data = io.load_yaml(path)
        return cls.model_validate(data)

    def to_yaml(self, path: Path) -> None:
        """Write the configuration back as YAML, omitting empty fields."""
        from model_config_harness.infrastructure import io

        io.dump_yaml(self.to_pruned_dict(), path)

    def to_pruned_dict(self) -> dict[str, Any]:
        return prune_empty(self.model_dump(mode="json"))


def prune_empty(data: Any) -> Any:
    """
    Drop mapping entries whose value is empty (None, "", 0, False, [] or {}).

    Empty nested mappings are dropped after pruning, except where the mapping
    itself is a one-of marker such as ``all: {}`` inside a version policy.
    List elements are kept as they are positional.
    """
    if isinstance(data, dict):
        pruned: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                inner = prune_empty(value)
                if inner or (value == {} and key in _MARKER_KEYS):
                    pruned[key] = inner
                continue
            value = prune_empty(value)
            if value in (None, "", 0, False, []):
                continue
            pruned[key] = value
        return pruned
    if isinstance(data, list):
        return [prune_empty(item) for item in data]
    return data


# One-of members that carry no fields but are meaningful when present
_MARKER_KEYS = frozenset({"all"})
