from model_config_harness.domain_models.enums import Platform
from model_config_harness.initializers.base import ArtifactInitializer


class PlanInitializer(ArtifactInitializer):
    @property
    def platform(self) -> str:
        return Platform.TENSORRT_PLAN.value
