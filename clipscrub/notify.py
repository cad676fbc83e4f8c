"""Audible cue and desktop notification after a scrub."""

import subprocess
import sys
from typing import Callable, IO, List, Optional

from .config import NotificationPolicy
from .log import logger
from .report import format_summary
from .shell import (
    Runner,
    applescript_quote,
    powershell_command,
    ps_quote,
    run_best_effort,
)
from .types import ScrubResult

NOTIFICATION_TITLE = "Clipboard scrubbed"
TOAST_SECONDS = 4


def should_notify(result: ScrubResult) -> bool:
    """Notify only when something was removed or normalized."""

    return result.changed


def toast_command(platform: str, title: str, message: str) -> List[str]:
    """Build the platform command that shows a desktop notification."""

    if platform == "win32":
        script = (
            "Add-Type -AssemblyName System.Windows.Forms; "
            "$n = New-Object System.Windows.Forms.NotifyIcon; "
            "$n.Icon = [System.Drawing.SystemIcons]::Information; "
            "$n.Visible = $true; "
            f"$n.ShowBalloonTip({TOAST_SECONDS * 1000}, {ps_quote(title)}, {ps_quote(message)}, 'Info'); "
            f"Start-Sleep -Seconds {TOAST_SECONDS}; "
            "$n.Dispose()"
        )
        return powershell_command(script)
    if platform == "darwin":
        script = (
            f"display notification {applescript_quote(message)} "
            f"with title {applescript_quote(title)}"
        )
        return ["osascript", "-e", script]
    return ["notify-send", title, message]


class Notifier:
    """Deliver the audible cue and toast for a scrub result."""

    def __init__(
        self,
        policy: NotificationPolicy,
        runner: Runner = subprocess.run,
        platform: str = sys.platform,
        beep: Optional[Callable[[], None]] = None,
        stream: Optional[IO[str]] = None,
    ) -> None:
        """Initialize with a policy and injectable platform hooks."""

        self.policy = policy
        self._runner = runner
        self._platform = platform
        self._beep = beep
        self._stream = stream

    def notify(self, result: ScrubResult) -> List[str]:
        """Notify about a result and return the channels that were delivered."""

        if not should_notify(result):
            return []
        delivered = []
        if not self.policy.suppress_audible_cue and self._play_cue():
            delivered.append("sound")
        if not self.policy.suppress_toast and self._show_toast(format_summary(result)):
            delivered.append("toast")
        return delivered

    def _play_cue(self) -> bool:
        try:
            if self._beep is not None:
                self._beep()
            elif self._platform == "win32":
                import winsound

                winsound.MessageBeep(winsound.MB_ICONASTERISK)
            else:
                stream = self._stream or sys.stderr
                stream.write("\a")
                stream.flush()
        except Exception as exc:
            logger.debug("audible cue unavailable: %s", exc)
            return False
        return True

    def _show_toast(self, message: str) -> bool:
        command = toast_command(self._platform, NOTIFICATION_TITLE, message)
        return run_best_effort(self._runner, command)
