from enum import StrEnum


class Platform(StrEnum):
    """Backend execution engines a model may declare."""

    TENSORFLOW_GRAPHDEF = "tensorflow_graphdef"
    TENSORFLOW_SAVEDMODEL = "tensorflow_savedmodel"
    CAFFE2_NETDEF = "caffe2_netdef"
    TENSORRT_PLAN = "tensorrt_plan"
    CUSTOM = "custom"

    def __repr__(self) -> str:
        return f"<Platform.{self.name}>"

    def __str__(self) -> str:
        return self.value


class DataType(StrEnum):
    TYPE_INVALID = "TYPE_INVALID"
    TYPE_BOOL = "TYPE_BOOL"
    TYPE_UINT8 = "TYPE_UINT8"
    TYPE_UINT16 = "TYPE_UINT16"
    TYPE_UINT32 = "TYPE_UINT32"
    TYPE_UINT64 = "TYPE_UINT64"
    TYPE_INT8 = "TYPE_INT8"
    TYPE_INT16 = "TYPE_INT16"
    TYPE_INT32 = "TYPE_INT32"
    TYPE_INT64 = "TYPE_INT64"
    TYPE_FP16 = "TYPE_FP16"
    TYPE_FP32 = "TYPE_FP32"
    TYPE_FP64 = "TYPE_FP64"
    TYPE_STRING = "TYPE_STRING"

    def __repr__(self) -> str:
        return f"<DataType.{self.name}>"

    def __str__(self) -> str:
        return self.value


class TensorFormat(StrEnum):
    FORMAT_NONE = "FORMAT_NONE"
    FORMAT_NHWC = "FORMAT_NHWC"
    FORMAT_NCHW = "FORMAT_NCHW"

    def __repr__(self) -> str:
        return f"<TensorFormat.{self.name}>"

    def __str__(self) -> str:
        return self.value


class InstanceKind(StrEnum):
    KIND_GPU = "KIND_GPU"
    KIND_CPU = "KIND_CPU"

    def __repr__(self) -> str:
        return f"<InstanceKind.{self.name}>"

    def __str__(self) -> str:
        return self.value
