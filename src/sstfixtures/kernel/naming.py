"""Naming scheme: keys, values and paths for fixture files.

Every function here is pure. Downstream conformance tests assert on the
literal strings produced below, so the formats are frozen:

- key:   "key" + 3-digit zero-padded index      e.g. key007
- value: value_v<ver>_<checksum>_<compression>_<iii>
- path:  sst_files/v<ver>/v<ver>_<checksum>_<compression>.sst

Keys are zero-padded so lexicographic order equals numeric order; the
table writer rejects keys that are not strictly increasing.
"""

from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Iterator, Tuple, Union

from sstfixtures._internal.canonical_json import canonical_sha256
from sstfixtures.kernel.params import (
    ChecksumType,
    CompressionType,
    parse_checksum,
    parse_compression,
)

if TYPE_CHECKING:
    from sstfixtures.kernel.matrix import Combination


RECORD_COUNT = 50
KEY_WIDTH = 3
FIXTURE_ROOT = "sst_files"
FIXTURE_SUFFIX = ".sst"

_MAX_INDEX = 10 ** KEY_WIDTH - 1


def _check_index(i: int) -> int:
    if not 0 <= i <= _MAX_INDEX:
        raise ValueError(f"Record index {i} out of range 0..{_MAX_INDEX} (keys are {KEY_WIDTH}-digit zero-padded)")
    return i


def record_key(i: int) -> str:
    """Key for record i: "key" followed by the zero-padded index."""
    return f"key{_check_index(i):0{KEY_WIDTH}d}"


def record_value(
    version: int,
    checksum: Union[str, ChecksumType],
    compression: Union[str, CompressionType],
    i: int,
) -> str:
    """Self-describing value: embeds every combination parameter and the index."""
    csum = parse_checksum(checksum).short_name
    comp = parse_compression(compression).short_name
    return f"value_v{version}_{csum}_{comp}_{_check_index(i):0{KEY_WIDTH}d}"


def fixture_path(
    version: int,
    checksum: Union[str, ChecksumType],
    compression: Union[str, CompressionType],
) -> PurePosixPath:
    """Canonical relative path of the fixture for one combination.

    All three short names appear in the file name, so distinct
    combinations never share a path.
    """
    csum = parse_checksum(checksum).short_name
    comp = parse_compression(compression).short_name
    name = f"v{version}_{csum}_{comp}{FIXTURE_SUFFIX}"
    return PurePosixPath(FIXTURE_ROOT) / f"v{version}" / name


def version_dir(version: int) -> PurePosixPath:
    """Directory holding every fixture of one format version."""
    return PurePosixPath(FIXTURE_ROOT) / f"v{version}"


def iter_records(combination: "Combination", count: int = RECORD_COUNT) -> Iterator[Tuple[bytes, bytes]]:
    """Yield (key, value) pairs as UTF-8 bytes in ascending key order."""
    for i in range(count):
        key = record_key(i)
        value = record_value(combination.version, combination.checksum, combination.compression, i)
        yield key.encode("utf-8"), value.encode("utf-8")


def content_digest(combination: "Combination", count: int = RECORD_COUNT) -> str:
    """sha256 over the canonical JSON of the logical records.

    Stable across regenerations even though writer-internal metadata
    (file bytes) may differ.
    """
    records = [[k.decode("utf-8"), v.decode("utf-8")] for k, v in iter_records(combination, count)]
    return canonical_sha256(records)
