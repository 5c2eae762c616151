"""Global constants for the model configuration golden harness."""

import os

# File names
DEFAULT_CONFIG_FILENAME = os.getenv("GOLDEN_CONFIG_FILENAME", "config.yaml")

# Golden files are any model directory entry starting with this prefix
EXPECTED_PREFIX = "expected"

# Golden runs always exercise this model version
VERSION_UNDER_TEST = "1"

# Fixture sets used by validate_all, relative to the test root
MODEL_CONFIG_SANITY_PATH = "testdata/model_config_sanity"
AUTOFILL_SANITY_PATH = "testdata/autofill_sanity"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"

# Artifact names used by the platform initializers
SAVEDMODEL_PROTO_FILENAME = "saved_model.pb"
NETDEF_INIT_FILENAME = "init_model.netdef"
