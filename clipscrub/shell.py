"""Best-effort subprocess helpers for platform notification tools."""

import subprocess
from typing import Callable, List

from .log import logger

Runner = Callable[..., object]

COMMAND_TIMEOUT_SECONDS = 15


def run_best_effort(runner: Runner, command: List[str]) -> bool:
    """Run a command, returning False instead of raising on any failure."""

    try:
        runner(command, check=True, capture_output=True, timeout=COMMAND_TIMEOUT_SECONDS)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("command %s failed: %s", command[0], exc)
        return False
    return True


def ps_quote(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""

    return "'" + value.replace("'", "''") + "'"


def powershell_command(script: str) -> List[str]:
    """Build a non-interactive PowerShell invocation for a script."""

    return ["powershell", "-NoProfile", "-NonInteractive", "-Command", script]


def applescript_quote(value: str) -> str:
    """Quote a value as an AppleScript string literal."""

    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
