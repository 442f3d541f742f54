"""Parameter space for the fixture matrix.

Three orthogonal dimensions drive fixture generation:
- format version (small positive integer, passed through to the writer)
- checksum algorithm (closed set, see ChecksumType)
- compression algorithm (closed set, see CompressionType)

Enum values ARE the canonical short names used in record values and
file paths. The mapping is fixed for the life of the process.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from sstfixtures.errors import ConfigurationError


class ChecksumType(str, Enum):
    """Block checksum algorithms understood by the table writer."""

    NO_CHECKSUM = "nocsum"
    CRC32C = "crc32c"
    XXHASH = "xxhash"
    XXHASH64 = "xxhash64"
    XXH3 = "xxh3"

    @property
    def short_name(self) -> str:
        return self.value


class CompressionType(str, Enum):
    """Block compression algorithms understood by the table writer."""

    NONE = "none"
    SNAPPY = "snappy"
    ZLIB = "zlib"
    LZ4 = "lz4"
    LZ4HC = "lz4hc"
    ZSTD = "zstd"

    @property
    def short_name(self) -> str:
        return self.value


def _parse_member(enum_cls, name: Union[str, Enum], label: str):
    if isinstance(name, enum_cls):
        return name
    try:
        return enum_cls(name)
    except ValueError:
        accepted = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(f"Unknown {label} '{name}' (expected one of: {accepted})") from None


def parse_checksum(name: Union[str, ChecksumType]) -> ChecksumType:
    """Resolve a canonical short name to a ChecksumType.

    Raises:
        ConfigurationError: if the name is not one of the known checksums
    """
    return _parse_member(ChecksumType, name, "checksum")


def parse_compression(name: Union[str, CompressionType]) -> CompressionType:
    """Resolve a canonical short name to a CompressionType.

    Raises:
        ConfigurationError: if the name is not one of the known compressions
    """
    return _parse_member(CompressionType, name, "compression")


def _reject_duplicates(values: tuple, label: str) -> tuple:
    seen = set()
    duplicates = set()
    for value in values:
        if value in seen:
            duplicates.add(value)
        seen.add(value)
    if duplicates:
        raise ValueError(f"Duplicate {label} not allowed: {sorted(duplicates)}")
    if not values:
        raise ValueError(f"At least one {label} is required")
    return values


class ParameterSpace(BaseModel):
    """Active dimension sets for one run.

    Iteration order of each tuple is the enumeration order of the matrix.
    Instances are immutable; narrow() returns a new space.
    """

    versions: Tuple[int, ...]
    checksums: Tuple[ChecksumType, ...]
    compressions: Tuple[CompressionType, ...]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("versions")
    @classmethod
    def validate_versions(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        return _reject_duplicates(tuple(v), "versions")

    @field_validator("checksums")
    @classmethod
    def validate_checksums(cls, v: Tuple[ChecksumType, ...]) -> Tuple[ChecksumType, ...]:
        return _reject_duplicates(tuple(v), "checksums")

    @field_validator("compressions")
    @classmethod
    def validate_compressions(cls, v: Tuple[CompressionType, ...]) -> Tuple[CompressionType, ...]:
        return _reject_duplicates(tuple(v), "compressions")

    @property
    def size(self) -> int:
        """Number of combinations in the full Cartesian product."""
        return len(self.versions) * len(self.checksums) * len(self.compressions)

    def narrow(
        self,
        version: Optional[int] = None,
        checksum: Optional[Union[str, ChecksumType]] = None,
        compression: Optional[Union[str, CompressionType]] = None,
    ) -> "ParameterSpace":
        """Replace any given dimension with a single value.

        Dimensions left as None keep their current set. A dimension is
        always substituted wholesale, never filtered. The version is not
        checked against DEFAULT_VERSIONS; unsupported values fail in the
        writer.
        """
        update = {}
        if version is not None:
            update["versions"] = (int(version),)
        if checksum is not None:
            update["checksums"] = (parse_checksum(checksum),)
        if compression is not None:
            update["compressions"] = (parse_compression(compression),)
        if not update:
            return self
        return ParameterSpace(**{**self.model_dump(), **update})


DEFAULT_VERSIONS: Tuple[int, ...] = (5, 6, 7)

DEFAULT_SPACE = ParameterSpace(
    versions=DEFAULT_VERSIONS,
    checksums=tuple(ChecksumType),
    compressions=tuple(CompressionType),
)

MINIMAL_SPACE = ParameterSpace(
    versions=DEFAULT_VERSIONS,
    checksums=(ChecksumType.CRC32C, ChecksumType.XXH3),
    compressions=(
        CompressionType.NONE,
        CompressionType.SNAPPY,
        CompressionType.LZ4,
        CompressionType.ZSTD,
    ),
)

PRESETS = {
    "all": DEFAULT_SPACE,
    "minimal": MINIMAL_SPACE,
}
