"""Command-line entrypoint: read the clipboard, scrub it, write it back."""

from dataclasses import dataclass
import json
from pathlib import Path
import sys
from typing import Callable, IO, List, Optional, Tuple

from .audit import AuditLogger, AuditWriter, EventLogWriter, audit_result
from .clipboard import ClipboardError, NoTextAvailable, read_text, write_text
from .config import (
    DEFAULT_CONFIG_PATH,
    ClipscrubConfig,
    ConfigError,
    apply_overrides,
    load_config,
)
from .log import logger, setup_logging
from .notify import Notifier
from .pipeline import scrub
from .report import format_report, result_to_dict
from .types import ScrubResult

EXIT_OK = 0
EXIT_NO_TEXT = 1
EXIT_CONFIG_ERROR = 2
EXIT_CLIPBOARD_ERROR = 3

STDIN_ENCODING = "utf-8"


@dataclass(frozen=True)
class ClipscrubContext:
    """Runtime context holding config and collaborator handles."""

    config: ClipscrubConfig
    notifier: Optional[Notifier]
    audit_writers: Tuple[AuditWriter, ...]


def load_context(
    config: ClipscrubConfig,
    notify: bool = True,
    event_log: Optional[EventLogWriter] = None,
) -> ClipscrubContext:
    """Build notification and audit collaborators from configuration."""

    writers: List[AuditWriter] = []
    if config.notifications.write_audit_log:
        writers.append(event_log or EventLogWriter())
    if config.notifications.audit_log_path:
        writers.append(AuditLogger(Path(config.notifications.audit_log_path)))
    notifier = Notifier(config.notifications) if notify else None
    return ClipscrubContext(config=config, notifier=notifier, audit_writers=tuple(writers))


def run_once(
    context: ClipscrubContext,
    read: Callable[[], str] = read_text,
    write: Optional[Callable[[str], None]] = write_text,
    write_unchanged: bool = False,
) -> Tuple[Optional[ScrubResult], int]:
    """Run one read, scrub, write, notify and audit cycle.

    Unchanged text is only written back when write_unchanged is set.
    """

    try:
        raw_text = read()
    except NoTextAvailable as exc:
        logger.warning("nothing to do: %s", exc)
        return None, EXIT_NO_TEXT

    result = scrub(raw_text, context.config.policy)

    if write is not None and (result.changed or write_unchanged):
        try:
            write(result.cleaned_text)
        except ClipboardError as exc:
            logger.error("%s", exc)
            return result, EXIT_CLIPBOARD_ERROR

    if context.notifier is not None:
        context.notifier.notify(result)
    audit_result(result, context.audit_writers)
    return result, EXIT_OK


def _read_stream(stream: IO[str]) -> Callable[[], str]:
    """Read raw bytes so stray bytes and CRLF reach the scrub untouched.

    Undecodable bytes become lone surrogates, which the scrub deletes.
    """

    def read() -> str:
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            return stream.read()
        return buffer.read().decode(STDIN_ENCODING, errors="surrogateescape")

    return read


def _write_stream(stream: IO[str]) -> Callable[[str], None]:
    def write(text: str) -> None:
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(text)
            stream.flush()
            return
        stream.flush()
        buffer.write(text.encode(STDIN_ENCODING, errors="surrogateescape"))
        buffer.flush()

    return write


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint for a single clipboard scrub."""

    import argparse

    parser = argparse.ArgumentParser(
        description="Strip invisible characters from the clipboard text"
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config/clipscrub.yaml (JSON-compatible YAML)",
    )
    parser.add_argument(
        "--keep-format-marks",
        action="store_true",
        help="Keep format/ZWJ marks (category Cf)",
    )
    parser.add_argument(
        "--keep-nbsp",
        dest="keep_no_break_space",
        action="store_true",
        help="Keep non-breaking spaces unchanged",
    )
    parser.add_argument("--no-sound", action="store_true", help="Do not play the audible cue")
    parser.add_argument("--no-toast", action="store_true", help="Do not show a notification")
    parser.add_argument(
        "--event-log",
        action="store_true",
        help="Write an OS event log entry when something changed",
    )
    parser.add_argument(
        "--audit-log",
        dest="audit_log_path",
        default=None,
        help="Append a JSONL audit record to this path when something changed",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Scrub standard input to standard output instead of the clipboard",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without writing the clipboard",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default WARNING)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = load_config(Path(args.config_path))
    except ConfigError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    config = apply_overrides(
        config,
        keep_format_marks=args.keep_format_marks,
        keep_no_break_space=args.keep_no_break_space,
        suppress_audible_cue=args.no_sound,
        suppress_toast=args.no_toast,
        write_audit_log=args.event_log,
        audit_log_path=args.audit_log_path,
    )

    report_stream = sys.stdout
    if args.stdin:
        context = load_context(config, notify=False)
        read = _read_stream(sys.stdin)
        write = None if args.dry_run else _write_stream(sys.stdout)
        report_stream = sys.stderr
    else:
        context = load_context(config, notify=not args.dry_run)
        read = read_text
        write = None if args.dry_run else write_text

    result, exit_code = run_once(context, read=read, write=write, write_unchanged=args.stdin)

    if result is not None:
        if args.json:
            print(json.dumps(result_to_dict(result), ensure_ascii=True), file=report_stream)
        else:
            print(format_report(result), file=report_stream)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
