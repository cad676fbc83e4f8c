"""Audit event creation, JSONL logging and OS event log entries."""

import json
import subprocess
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from .log import logger
from .report import format_summary
from .shell import Runner, powershell_command, ps_quote, run_best_effort
from .types import ScrubResult

EVENT_ID = 63301
EVENT_SOURCE = "clipscrub"
EVENT_LOG_NAME = "Application"


@dataclass(frozen=True)
class AuditEvent:
    """Structured audit record for a single scrub. Never holds clipboard text."""

    timestamp: str
    event_id: int
    message: str
    original_length: int
    cleaned_length: int
    removed_count: int
    nbsp_normalized: bool
    histogram: Dict[str, int]
    unicode_version: str


class AuditWriter(Protocol):
    def log(self, result: ScrubResult, timestamp: Optional[str] = None) -> None: ...


def build_audit_event(result: ScrubResult, timestamp: Optional[str] = None) -> AuditEvent:
    """Build an audit event from a ScrubResult."""

    event_time = timestamp or datetime.now(timezone.utc).isoformat()
    return AuditEvent(
        timestamp=event_time,
        event_id=EVENT_ID,
        message=format_summary(result),
        original_length=result.original_length,
        cleaned_length=result.cleaned_length,
        removed_count=result.removed_count,
        nbsp_normalized=result.nbsp_normalized,
        histogram=dict(result.histogram),
        unicode_version=result.unicode_version,
    )


def audit_event_to_json(event: AuditEvent) -> str:
    """Serialize an audit event to a JSON string."""

    return json.dumps(event.__dict__, sort_keys=True, ensure_ascii=True)


class AuditLogger:
    """Append-only JSONL audit log writer."""

    def __init__(self, path: Path) -> None:
        """Initialize a logger that appends to the given path."""

        self.path = Path(path)

    def log(self, result: ScrubResult, timestamp: Optional[str] = None) -> None:
        """Append a ScrubResult to the JSONL audit log."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        event = build_audit_event(result, timestamp=timestamp)
        payload = audit_event_to_json(event)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(payload + "\n")


def event_log_command(platform: str, message: str) -> List[str]:
    """Build the platform command that records an OS log entry."""

    if platform == "win32":
        source = ps_quote(EVENT_SOURCE)
        log_name = ps_quote(EVENT_LOG_NAME)
        script = (
            f"if (-not [System.Diagnostics.EventLog]::SourceExists({source})) "
            f"{{ New-EventLog -LogName {log_name} -Source {source} }}; "
            f"Write-EventLog -LogName {log_name} -Source {source} "
            f"-EventId {EVENT_ID} -EntryType Information -Message {ps_quote(message)}"
        )
        return powershell_command(script)
    return ["logger", "-t", EVENT_SOURCE, f"[{EVENT_ID}] {message}"]


class EventLogWriter:
    """Write scrub summaries to the Windows event log or syslog."""

    def __init__(self, runner: Runner = subprocess.run, platform: str = sys.platform) -> None:
        """Initialize with an injectable command runner."""

        self._runner = runner
        self._platform = platform

    def log(self, result: ScrubResult, timestamp: Optional[str] = None) -> None:
        """Record the result summary, raising OSError when the tool fails."""

        command = event_log_command(self._platform, format_summary(result))
        if not run_best_effort(self._runner, command):
            raise OSError(f"event log entry {EVENT_ID} was not written")


def audit_result(
    result: ScrubResult,
    writers: Iterable[AuditWriter],
    timestamp: Optional[str] = None,
) -> int:
    """Send a changed result to every writer and return how many succeeded."""

    if not result.changed:
        return 0
    written = 0
    for writer in writers:
        try:
            writer.log(result, timestamp=timestamp)
        except Exception as exc:
            logger.debug("audit writer %s failed: %s", type(writer).__name__, exc)
            continue
        written += 1
    return written
