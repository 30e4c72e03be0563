# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from sourcecanon.adapters.protocol import AnnouncementFormatError, dump_source_details
from sourcecanon.app import import_announcements, resolve_announcement_file, resolve_recording
from sourcecanon.config import ConfigurationError, configure_logging
from sourcecanon.domain.model import SourceResolutionError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from sourcecanon.domain.resolution import SourceDetailsIndex

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve canonical identities of recorded sources"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve a JSON Lines announcement file")
    resolve.add_argument("path", type=Path, help="File with one newSource payload per line")
    resolve.add_argument(
        "--source",
        type=str,
        help="Only print the description of this source id and its alternates",
    )

    import_ = subparsers.add_parser("import", help="Store announcements for a recording")
    import_.add_argument("path", type=Path, help="File with one newSource payload per line")
    import_.add_argument(
        "--recording",
        type=str,
        required=True,
        help="Recording id to append the announcements to",
    )

    show = subparsers.add_parser("show", help="Resolve the stored announcements of a recording")
    show.add_argument(
        "--recording",
        type=str,
        required=True,
        help="Recording id to resolve",
    )
    show.add_argument(
        "--source",
        type=str,
        help="Only print the description of this source id and its alternates",
    )

    return parser.parse_args(list(argv))


def _render(index: SourceDetailsIndex, source_id: str | None) -> dict[str, Any]:
    if source_id is None:
        return dump_source_details(index.values())
    if source_id not in index:
        raise LookupError(f"Unknown source id: {source_id}")
    payload = dump_source_details([index[source_id]])[source_id]
    return {
        **payload,
        "alternateIds": list(index.alternate_ids(source_id)),
        "correspondingSourceIds": list(index.corresponding_source_ids(source_id)),
    }


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging()
    except ConfigurationError:
        log.exception("Invalid logging configuration")
        sys.exit(2)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "resolve":
            index = resolve_announcement_file(parsed_args.path)
            print(json.dumps(_render(index, parsed_args.source), indent=2))
        elif parsed_args.command == "import":
            stored = import_announcements(parsed_args.path, recording_id=parsed_args.recording)
            log.info("Stored %s announcements", stored)
        elif parsed_args.command == "show":
            index = resolve_recording(parsed_args.recording)
            print(json.dumps(_render(index, parsed_args.source), indent=2))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (AnnouncementFormatError, OSError):
        log.exception("Could not read announcements")
        sys.exit(2)
    except LookupError:
        log.exception("Nothing to show")
        sys.exit(2)
    except SourceResolutionError:
        log.exception("Source resolution failed")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
