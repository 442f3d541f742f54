"""Table writer backed by RocksDB's SstFileWriter via rocksdict."""

from typing import Callable, Dict

import rocksdict

from sstfixtures.kernel.params import ChecksumType, CompressionType
from sstfixtures.writer import TableOptions


# Every ChecksumType/CompressionType member must appear here;
# tests/test_rocksdict_writer.py checks both tables are exhaustive.
CHECKSUM_FACTORIES: Dict[ChecksumType, Callable[[], "rocksdict.ChecksumType"]] = {
    ChecksumType.NO_CHECKSUM: rocksdict.ChecksumType.no_checksum,
    ChecksumType.CRC32C: rocksdict.ChecksumType.crc32c,
    ChecksumType.XXHASH: rocksdict.ChecksumType.xxhash,
    ChecksumType.XXHASH64: rocksdict.ChecksumType.xxhash64,
    ChecksumType.XXH3: rocksdict.ChecksumType.xxh3,
}

COMPRESSION_FACTORIES: Dict[CompressionType, Callable[[], "rocksdict.DBCompressionType"]] = {
    CompressionType.NONE: rocksdict.DBCompressionType.none,
    CompressionType.SNAPPY: rocksdict.DBCompressionType.snappy,
    CompressionType.ZLIB: rocksdict.DBCompressionType.zlib,
    CompressionType.LZ4: rocksdict.DBCompressionType.lz4,
    CompressionType.LZ4HC: rocksdict.DBCompressionType.lz4hc,
    CompressionType.ZSTD: rocksdict.DBCompressionType.zstd,
}

# Block-based table format versions the bundled RocksDB accepts.
# rocksdict does not validate this itself; any other value produces a
# footer no reader can open.
MIN_FORMAT_VERSION = 2
MAX_FORMAT_VERSION = 7


def check_format_version(format_version: int) -> None:
    """Raise ValueError for a format version RocksDB would refuse.

    The message follows BlockBasedTableFactory::ValidateOptions.
    """
    if not MIN_FORMAT_VERSION <= format_version <= MAX_FORMAT_VERSION:
        raise ValueError(
            f"Unsupported BlockBasedTable format_version {format_version}. "
            "Please check include/rocksdb/table.h for more info"
        )


def build_options(table_options: TableOptions) -> rocksdict.Options:
    """Translate TableOptions into rocksdict Options.

    raw_mode=True so keys and values reach the file as the exact bytes
    given, without rocksdict's type-tag encoding.

    Raises ValueError for an unsupported format version, before any
    file is opened.
    """
    check_format_version(table_options.format_version)
    block_opts = rocksdict.BlockBasedOptions()
    block_opts.set_format_version(table_options.format_version)
    block_opts.set_checksum_type(CHECKSUM_FACTORIES[table_options.checksum]())
    block_opts.set_bloom_filter(table_options.bloom_bits_per_key, table_options.bloom_block_based)

    options = rocksdict.Options(raw_mode=True)
    options.set_block_based_table_factory(block_opts)
    options.set_compression_type(COMPRESSION_FACTORIES[table_options.compression]())
    return options


class RocksDictTableWriter:
    """TableWriter over rocksdict.SstFileWriter."""

    def __init__(self, table_options: TableOptions):
        self.table_options = table_options
        self._writer = rocksdict.SstFileWriter(options=build_options(table_options))

    def open(self, path: str) -> None:
        self._writer.open(path)

    def put(self, key: bytes, value: bytes) -> None:
        self._writer[key] = value

    def finish(self) -> None:
        self._writer.finish()
