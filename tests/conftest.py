"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed sstfixtures package.
Driver and CLI tests use an in-memory table writer instead of RocksDB.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import pytest

from sstfixtures.writer import TableOptions


SUPPORTED_VERSIONS = (5, 6, 7)


class FakeTableWriter:
    """Records every call; creates the file on open like SstFileWriter does.

    On finish the records are written as JSON lines so tests can inspect
    logical content.
    """

    def __init__(self, registry: "FakeWriterRegistry", options: TableOptions):
        self.registry = registry
        self.options = options
        self.path: Optional[str] = None
        self.records: List[Tuple[bytes, bytes]] = []
        self.finished = False

    def _maybe_fail(self, stage: str) -> None:
        if self.path is None:
            return
        name = Path(self.path).name
        if (name, stage) in self.registry.failures:
            raise RuntimeError(f"injected {stage} failure")

    def open(self, path: str) -> None:
        self.path = path
        self._maybe_fail("open")
        Path(path).write_bytes(b"")
        self.registry.opened.append(path)

    def put(self, key: bytes, value: bytes) -> None:
        self._maybe_fail("put")
        if self.records and key <= self.records[-1][0]:
            raise RuntimeError("Keys must be added in strictly increasing order")
        self.records.append((key, value))

    def finish(self) -> None:
        self._maybe_fail("finish")
        lines = [json.dumps([k.decode("utf-8"), v.decode("utf-8")]) for k, v in self.records]
        Path(self.path).write_text("\n".join(lines) + "\n", encoding="utf-8")
        self.finished = True
        self.registry.finished[self.path] = list(self.records)


class FakeWriterRegistry:
    """Writer factory that hands out FakeTableWriters and remembers them."""

    def __init__(self):
        self.writers: List[FakeTableWriter] = []
        self.opened: List[str] = []
        self.finished: Dict[str, List[Tuple[bytes, bytes]]] = {}
        self.rejected: List[TableOptions] = []
        self.failures: Set[Tuple[str, str]] = set()  # (file name, stage)

    def fail(self, file_name: str, stage: str) -> None:
        self.failures.add((file_name, stage))

    def __call__(self, options: TableOptions) -> FakeTableWriter:
        # Same check as the rocksdict adapter: rejected before any file is opened
        if options.format_version not in SUPPORTED_VERSIONS:
            self.rejected.append(options)
            raise ValueError(f"Unsupported BlockBasedTable format_version {options.format_version}")
        writer = FakeTableWriter(self, options)
        self.writers.append(writer)
        return writer


def read_fake_fixture(path: Path) -> List[Tuple[str, str]]:
    """Read a file written by FakeTableWriter.finish()."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return [tuple(json.loads(line)) for line in lines if line]


@pytest.fixture
def fake_writer():
    return FakeWriterRegistry()


@pytest.fixture
def patched_writer(monkeypatch, fake_writer):
    """Route the driver's default writer factory to the fake writer."""
    from sstfixtures import driver

    monkeypatch.setattr(driver, "default_writer_factory", fake_writer)
    return fake_writer


@pytest.fixture
def read_fixture():
    return read_fake_fixture
