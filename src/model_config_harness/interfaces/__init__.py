from model_config_harness.interfaces.base_initializer import BaseInitializer, InitFunc
from model_config_harness.interfaces.storage import BaseStorage

__all__ = ["BaseInitializer", "BaseStorage", "InitFunc"]
