"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- sstfixtures exposes run_matrix and the naming functions at the root
- Importing the package does not load the RocksDB binding
- Package layout keeps kernel/ and adapters/ inside src/sstfixtures
"""

import subprocess
import sys
from pathlib import Path


def test_root_exports():
    import sstfixtures

    for name in sstfixtures.__all__:
        assert hasattr(sstfixtures, name), name
    assert callable(sstfixtures.run_matrix)
    assert sstfixtures.record_key(0) == "key000"


def test_version_string():
    import sstfixtures

    # in dev mode it's "dev", in installed mode it's "1.0.0"
    assert sstfixtures.__version__ in ("1.0.0", "dev")


def test_import_does_not_load_rocksdict():
    """rocksdict is only imported when the default writer is used."""
    code = "import sys, sstfixtures, sstfixtures.cli; print('rocksdict' in sys.modules)"
    proc = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
    assert proc.stdout.strip() == "False"


def test_source_layout():
    repo_root = Path(__file__).resolve().parent.parent
    pkg = repo_root / "src" / "sstfixtures"
    assert (pkg / "__init__.py").exists()
    assert (pkg / "kernel").is_dir()
    assert (pkg / "adapters").is_dir()
    assert (pkg / "_internal").is_dir()


def test_module_entry_point_help():
    proc = subprocess.run(
        [sys.executable, "-m", "sstfixtures", "--help"],
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0
    assert "--compression" in proc.stdout
