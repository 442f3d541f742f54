"""Writer adapter: one combination in, one fixture file out.

The table writer itself is opaque. It is created from a TableOptions
bundle by a writer factory, then driven through open -> put x N -> finish.
Any exception raised at a stage stops that file and is reported with the
stage, the target path and the writer's message. No partial-file cleanup
is attempted.
"""

from pathlib import Path
from typing import Callable, Protocol, Union

from pydantic import BaseModel, ConfigDict

from sstfixtures.codes import WriterStage
from sstfixtures.errors import WriterStageError
from sstfixtures.kernel.matrix import Combination
from sstfixtures.kernel.naming import RECORD_COUNT, content_digest, iter_records
from sstfixtures.kernel.params import ChecksumType, CompressionType
from sstfixtures.kernel.run_report import FileOutcome


BLOOM_BITS_PER_KEY = 10.0


class TableOptions(BaseModel):
    """Table writer configuration for one fixture file."""
    format_version: int
    checksum: ChecksumType
    compression: CompressionType
    bloom_bits_per_key: float = BLOOM_BITS_PER_KEY
    bloom_block_based: bool = False  # full filter, same for every combination

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def for_combination(cls, combination: Combination) -> "TableOptions":
        return cls(
            format_version=combination.version,
            checksum=combination.checksum,
            compression=combination.compression,
        )


class TableWriter(Protocol):
    """Minimal surface of an SST file writer."""

    def open(self, path: str) -> None: ...

    def put(self, key: bytes, value: bytes) -> None: ...

    def finish(self) -> None: ...


WriterFactory = Callable[[TableOptions], TableWriter]


def _write(combination: Combination, target: str, writer_factory: WriterFactory, record_count: int) -> int:
    try:
        writer = writer_factory(TableOptions.for_combination(combination))
    except Exception as e:
        raise WriterStageError.from_exception(WriterStage.CONFIGURE, target, e) from e

    try:
        writer.open(target)
    except Exception as e:
        raise WriterStageError.from_exception(WriterStage.OPEN, target, e) from e

    written = 0
    for key, value in iter_records(combination, record_count):
        try:
            writer.put(key, value)
        except Exception as e:
            message = f"key {key.decode('utf-8')}: {str(e) or type(e).__name__}"
            raise WriterStageError(WriterStage.PUT, target, message, records_written=written) from e
        written += 1

    try:
        writer.finish()
    except Exception as e:
        raise WriterStageError.from_exception(WriterStage.FINISH, target, e, records_written=written) from e
    return written


def write_fixture(
    combination: Combination,
    target: Union[str, Path],
    writer_factory: WriterFactory,
    record_count: int = RECORD_COUNT,
) -> FileOutcome:
    """Write all records of one combination to target.

    Args:
        combination: the (version, checksum, compression) triple
        target: filesystem path to open for writing (overwritten if present)
        writer_factory: builds a TableWriter from TableOptions
        record_count: number of records (RECORD_COUNT for real fixtures)

    Returns:
        FileOutcome; ok=False carries the failing stage and message
    """
    target_str = str(target)
    fields = {
        "path": combination.path.as_posix(),
        "version": combination.version,
        "checksum": combination.checksum,
        "compression": combination.compression,
    }
    try:
        written = _write(combination, target_str, writer_factory, record_count)
    except WriterStageError as e:
        return FileOutcome(
            **fields,
            ok=False,
            records_written=e.records_written,
            stage=e.stage,
            message=e.message,
        )
    return FileOutcome(
        **fields,
        ok=True,
        records_written=written,
        content_sha256=content_digest(combination, record_count),
    )
