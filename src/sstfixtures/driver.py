"""Matrix driver: write one fixture per combination and aggregate outcomes.

Combinations are processed strictly one after another. A failing file is
reported and counted; the run always continues to the end of the matrix.
"""

import sys
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

from sstfixtures.kernel.matrix import combination_count, iter_combinations
from sstfixtures.kernel.naming import version_dir
from sstfixtures.kernel.params import ParameterSpace
from sstfixtures.kernel.run_report import FileOutcome, RunReport
from sstfixtures.writer import TableOptions, TableWriter, WriterFactory, write_fixture


def default_writer_factory(table_options: TableOptions) -> TableWriter:
    """Build the RocksDB-backed writer."""
    # Lazy import: rocksdict is only loaded when a real file is written
    from sstfixtures.adapters.rocksdict_writer import RocksDictTableWriter

    return RocksDictTableWriter(table_options)


def _normalize_root(root: Union[str, Path]) -> Path:
    return Path(root) if not isinstance(root, Path) else root


def ensure_directories(space: ParameterSpace, root: Union[str, Path] = ".") -> List[Path]:
    """Create sst_files/v<version>/ under root for every active version.

    Missing directories are created; existing ones and their contents
    are left untouched.
    """
    root = _normalize_root(root)
    created = []
    for version in space.versions:
        directory = root / version_dir(version)
        directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)
    return created


def plan_paths(space: ParameterSpace) -> List[PurePosixPath]:
    """Canonical relative paths of every fixture, in enumeration order."""
    return [combination.path for combination in iter_combinations(space)]


def run_matrix(
    space: ParameterSpace,
    root: Union[str, Path] = ".",
    writer_factory: Optional[WriterFactory] = None,
    quiet: bool = False,
) -> RunReport:
    """Generate every fixture of the parameter space.

    Args:
        space: active dimension sets (already narrowed)
        root: directory under which sst_files/ is created
        writer_factory: builds a TableWriter per file; RocksDB by default
        quiet: suppress per-file progress lines (errors are always printed)

    Returns:
        RunReport with attempted == combination_count(space)
    """
    root = _normalize_root(root)
    factory = writer_factory or default_writer_factory
    ensure_directories(space, root)

    total = combination_count(space)
    index = 0
    failed = 0
    outcomes: List[FileOutcome] = []

    for combination in iter_combinations(space):
        target = root / combination.path
        outcome = write_fixture(combination, target, factory)

        index += 1
        if not outcome.ok:
            failed += 1
        outcomes.append(outcome)

        if outcome.ok:
            if not quiet:
                print(f"[{index}/{total}] OK {outcome.describe()}")
        else:
            if not quiet:
                print(f"[{index}/{total}] FAILED {outcome.path}")
            print(f"Error: {outcome.describe()}", file=sys.stderr)

    return RunReport(
        attempted=index,
        succeeded=index - failed,
        failed=failed,
        outcomes=outcomes,
    )
