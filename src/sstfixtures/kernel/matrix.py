"""Cartesian enumeration of the parameter space."""

import itertools
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterator

from sstfixtures.kernel.naming import fixture_path
from sstfixtures.kernel.params import ChecksumType, CompressionType, ParameterSpace


@dataclass(frozen=True)
class Combination:
    """One (format version, checksum, compression) triple."""
    version: int
    checksum: ChecksumType
    compression: CompressionType

    @property
    def path(self) -> PurePosixPath:
        return fixture_path(self.version, self.checksum, self.compression)


def iter_combinations(space: ParameterSpace) -> Iterator[Combination]:
    """Yield every combination of the space exactly once.

    Order: version outermost, then checksum, then compression, each in
    the order the space lists them.
    """
    for version, checksum, compression in itertools.product(
        space.versions, space.checksums, space.compressions
    ):
        yield Combination(version=version, checksum=checksum, compression=compression)


def combination_count(space: ParameterSpace) -> int:
    """Number of files a run over space attempts."""
    return space.size
