"""sstfixtures: deterministic SST fixture matrix for format conformance tests."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sstfixtures")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from sstfixtures.codes import WriterStage
from sstfixtures.driver import ensure_directories, plan_paths, run_matrix
from sstfixtures.errors import ConfigurationError, WriterStageError
from sstfixtures.kernel.matrix import Combination, iter_combinations
from sstfixtures.kernel.naming import RECORD_COUNT, fixture_path, record_key, record_value
from sstfixtures.kernel.params import (
    DEFAULT_SPACE,
    MINIMAL_SPACE,
    ChecksumType,
    CompressionType,
    ParameterSpace,
)
from sstfixtures.kernel.run_report import FileOutcome, RunReport

__all__ = [
    "__version__",
    "run_matrix",
    "ensure_directories",
    "plan_paths",
    "Combination",
    "iter_combinations",
    "RECORD_COUNT",
    "record_key",
    "record_value",
    "fixture_path",
    "ChecksumType",
    "CompressionType",
    "ParameterSpace",
    "DEFAULT_SPACE",
    "MINIMAL_SPACE",
    "FileOutcome",
    "RunReport",
    "WriterStage",
    "ConfigurationError",
    "WriterStageError",
]
