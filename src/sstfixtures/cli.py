"""sst-fixtures CLI: generate the SST fixture matrix."""

import argparse
import sys
from pathlib import Path


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits 1 (not 2) on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    from .kernel.params import ChecksumType, CompressionType

    parser = _ArgumentParser(
        prog="sst-fixtures",
        description="Generate RocksDB SST fixtures for every format version x checksum x compression combination"
    )
    preset = parser.add_mutually_exclusive_group()
    preset.add_argument(
        "--all",
        dest="preset",
        action="store_const",
        const="all",
        help="Full default parameter space (default)"
    )
    preset.add_argument(
        "--minimal",
        dest="preset",
        action="store_const",
        const="minimal",
        help="Minimal preset: versions 5,6,7; checksums crc32c,xxh3; compressions none,snappy,lz4,zstd"
    )
    parser.set_defaults(preset="all")
    parser.add_argument(
        "--version",
        type=int,
        default=None,
        metavar="V",
        help="Only generate format version V"
    )
    parser.add_argument(
        "--checksum",
        default=None,
        metavar="C",
        help=f"Only generate checksum C ({', '.join(m.value for m in ChecksumType)})"
    )
    parser.add_argument(
        "--compression",
        default=None,
        metavar="C",
        help=f"Only generate compression C ({', '.join(m.value for m in CompressionType)})"
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("."),
        help="Directory under which sst_files/ is created (defaults to the current directory)"
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write the run report as canonical JSON to this path"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the fixture paths that would be generated and exit"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    return parser


def main():
    """Main CLI entry point for sst-fixtures."""
    from .errors import ConfigurationError
    from .kernel.params import PRESETS

    parser = build_parser()
    args = parser.parse_args()

    # Narrowing happens before any directory or file is touched
    try:
        space = PRESETS[args.preset].narrow(
            version=args.version,
            checksum=args.checksum,
            compression=args.compression,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.list:
        from .driver import plan_paths

        for path in plan_paths(space):
            print(path.as_posix())
        return

    try:
        from .driver import run_matrix
        from ._internal.canonical_json import canonical_dumps
        from .kernel.matrix import combination_count

        out_dir = Path(args.out_dir).resolve()
        if not args.quiet:
            print(f"Generating {combination_count(space)} SST fixtures under {out_dir / 'sst_files'}")

        report = run_matrix(space, out_dir, quiet=args.quiet)

        if args.report is not None:
            report_path = Path(args.report).resolve()
            report_path.parent.mkdir(parents=True, exist_ok=True)
            report_path.write_text(canonical_dumps(report.model_dump(mode="json")) + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if not args.quiet:
        status = "OK" if report.ok else "FAILED"
        print(f"[{status}] Fixture generation complete")
        print(f"  Attempted: {report.attempted}")
        print(f"  Succeeded: {report.succeeded}")
        print(f"  Failed: {report.failed}")
        if args.report is not None:
            print(f"  Report: {report_path}")
    if not report.ok:
        for outcome in report.failures:
            print(f"  Failed: {outcome.describe()}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
