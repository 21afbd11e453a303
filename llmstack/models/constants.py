"""Constants for llmstack models and commands."""

import sys
from enum import auto

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class Backend(StrEnum):
    """Container backends the stack can run on."""

    PODMAN = auto()
    DOCKER = auto()


class RuntimeSource(StrEnum):
    """How the container backend was chosen."""

    OVERRIDE = auto()
    DETECTED = auto()


class SecretSource(StrEnum):
    """Channel the MongoDB credential was read from, highest precedence first."""

    SECRET_FILE = auto()
    ENVIRONMENT = auto()
    DOTENV_FILE = auto()


class Environment(StrEnum):
    """Execution environment a benchmark ran in."""

    GPU = auto()
    CPU = auto()


class Metric(StrEnum):
    """Throughput metrics tracked per model."""

    TOKEN_GENERATION = "tokenGeneration"
    PROMPT_PROCESSING = "promptProcessing"


class Verdict(StrEnum):
    """Aggregate outcome of a baseline comparison."""

    OK = "OK"
    WARN = "WARN"
    FAIL = "FAIL"


class FindingStatus(StrEnum):
    """Outcome for a single metric."""

    OK = "OK"
    REGRESSION = "REGRESSION"
    WARN = "WARN"


class PerformanceProfile(StrEnum):
    """Rough generation-speed bands for a local model."""

    EXCELLENT = auto()
    GOOD = auto()
    MODERATE = auto()
    SLOW = auto()


# Environment variables read at the CLI edge
RUNTIME_ENV_VAR = "CONTAINER_RUNTIME"
SECRET_ENV_VAR = "MONGODB_URI"
SECRET_FILE_ENV_VAR = "MONGODB_URI_FILE"
LOG_LEVEL_ENV_VAR = "LLMSTACK_LOG_LEVEL"
LOG_TIMESTAMPS_ENV_VAR = "LLMSTACK_LOG_TIMESTAMPS"

# Default file locations, relative to the stack checkout
DEFAULT_SECRET_FILE = "secrets/mongodb_uri"
DEFAULT_DOTENV_FILE = ".env"
DEFAULT_BASELINES_FILE = "benchmarks/baselines.json"

# Credential template markers
CREDENTIAL_PLACEHOLDER = "username:password"
TEMPLATE_MARKERS = (CREDENTIAL_PLACEHOLDER, "your-")
LIVE_URI_PATTERN = r"mongodb(\+srv)?://"

# Generation speed bands in tokens/sec (exclusive lower bounds)
EXCELLENT_TOKENS_PER_SEC = 70.0
GOOD_TOKENS_PER_SEC = 40.0
MODERATE_TOKENS_PER_SEC = 15.0
