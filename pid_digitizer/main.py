import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pid_digitizer.config.settings import Settings
from pid_digitizer.logging.logger import Log
from pid_digitizer.session.exceptions import FileReadError
from pid_digitizer.session.file_loader import FileLoader
from pid_digitizer.session.orchestrator import SessionOrchestrator, build_orchestrator
from pid_digitizer.storage.connection import close_pool, ensure_schema, init_pool
from pid_digitizer.storage.serializer import record_to_payload


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pid-digitizer",
        description="Extract a component inventory from P&ID images or PDFs.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Diagram images or PDFs")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each finished record as JSON instead of a summary line",
    )
    return parser.parse_args(argv)


def run(
    orchestrator: SessionOrchestrator,
    paths: Sequence[Path],
    as_json: bool = False,
) -> int:
    """Submit each file in order within one session. Returns the exit code."""
    loader = FileLoader()
    failures = 0
    for path in paths:
        try:
            upload = loader.load(path)
        except FileReadError as exc:
            Log.error(str(exc))
            failures += 1
            continue
        record = orchestrator.submit(upload.file_name, upload.data, upload.mime_type)
        if record is None:
            print(f"{upload.file_name}: {orchestrator.state.error}", file=sys.stderr)
            failures += 1
            continue
        if as_json:
            print(json.dumps(record_to_payload(record), indent=2))
        else:
            stats = orchestrator.stats()
            print(
                f"{record.file_name} v{record.version}: {stats.total} components, "
                f"{stats.operational} operational, {stats.needs_attention} need attention"
            )
    return 1 if failures else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> orchestrator -> process files."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    use_postgres = settings.storage_backend.lower() == "postgres"
    if use_postgres:
        init_pool(settings)
    try:
        if use_postgres:
            ensure_schema()
        return run(build_orchestrator(settings), args.files, as_json=args.json)
    finally:
        if use_postgres:
            close_pool()


if __name__ == "__main__":
    sys.exit(main())
