"""Per-file outcomes and the aggregate run report."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field

from sstfixtures.codes import WriterStage
from sstfixtures.kernel.params import ChecksumType, CompressionType


class FileOutcome(BaseModel):
    """Result of writing one fixture file."""
    path: str  # canonical relative path, e.g. "sst_files/v5/v5_crc32c_snappy.sst"
    version: int
    checksum: ChecksumType
    compression: CompressionType
    ok: bool
    records_written: int
    stage: Optional[WriterStage] = None  # failing stage, None on success
    message: Optional[str] = None  # writer diagnostic, None on success
    content_sha256: Optional[str] = None  # digest of logical records, set on success

    model_config = ConfigDict(frozen=True, extra="forbid")

    def describe(self) -> str:
        if self.ok:
            return f"{self.path} ({self.records_written} records)"
        stage = self.stage.value if self.stage is not None else "UNKNOWN"
        return f"[{stage}] {self.path}: {self.message}"


class RunReport(BaseModel):
    """Aggregate counts for a completed run. Never mutated after the run."""
    format: str = "sstfixtures.run"
    version: str = "0.1"
    attempted: int
    succeeded: int
    failed: int
    outcomes: List[FileOutcome]  # enumeration order

    model_config = ConfigDict(frozen=True, extra="forbid")

    @computed_field
    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def failures(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]
