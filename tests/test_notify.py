import io
import subprocess
import unittest

from clipscrub.config import NotificationPolicy
from clipscrub.notify import Notifier, should_notify, toast_command
from clipscrub.pipeline import scrub


class RecordingRunner:
    def __init__(self, error: Exception = None) -> None:
        self.commands = []
        self.error = error

    def __call__(self, command, **kwargs):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(command, 0)


class NotifyTests(unittest.TestCase):
    def test_should_notify(self) -> None:
        self.assertFalse(should_notify(scrub("clean")))
        self.assertTrue(should_notify(scrub("a\u200b")))
        self.assertTrue(should_notify(scrub("a\u00a0b")))
        for text in ("clean", "a\u200b", "a\u00a0b", ""):
            result = scrub(text)
            self.assertEqual(should_notify(result), result.changed)

    def test_notifies_on_change(self) -> None:
        beeps = []
        runner = RecordingRunner()
        notifier = Notifier(
            NotificationPolicy(), runner=runner, platform="linux", beep=lambda: beeps.append(1)
        )
        delivered = notifier.notify(scrub("a\u200b"))
        self.assertEqual(delivered, ["sound", "toast"])
        self.assertEqual(beeps, [1])
        self.assertEqual(runner.commands[0][0], "notify-send")

    def test_silent_when_nothing_changed(self) -> None:
        runner = RecordingRunner()
        notifier = Notifier(NotificationPolicy(), runner=runner, platform="linux", beep=lambda: None)
        self.assertEqual(notifier.notify(scrub("clean")), [])
        self.assertEqual(runner.commands, [])

    def test_respects_suppression_flags(self) -> None:
        runner = RecordingRunner()
        policy = NotificationPolicy(suppress_audible_cue=True, suppress_toast=True)
        notifier = Notifier(policy, runner=runner, platform="linux", beep=self.fail)
        self.assertEqual(notifier.notify(scrub("a\u200b")), [])
        self.assertEqual(runner.commands, [])

    def test_terminal_bell_fallback(self) -> None:
        stream = io.StringIO()
        policy = NotificationPolicy(suppress_toast=True)
        notifier = Notifier(policy, platform="linux", stream=stream)
        self.assertEqual(notifier.notify(scrub("a\u200b")), ["sound"])
        self.assertEqual(stream.getvalue(), "\a")

    def test_collaborator_failures_degrade_silently(self) -> None:
        def broken_beep() -> None:
            raise RuntimeError("no audio device")

        runner = RecordingRunner(error=FileNotFoundError("notify-send"))
        notifier = Notifier(NotificationPolicy(), runner=runner, platform="linux", beep=broken_beep)
        self.assertEqual(notifier.notify(scrub("a\u200b")), [])
        self.assertEqual(len(runner.commands), 1)


class ToastCommandTests(unittest.TestCase):
    def test_windows_quotes_message(self) -> None:
        command = toast_command("win32", "Title", "it's done")
        self.assertEqual(command[0], "powershell")
        self.assertIn("'it''s done'", command[-1])

    def test_macos_uses_osascript(self) -> None:
        command = toast_command("darwin", "Title", 'say "hi"')
        self.assertEqual(command[:2], ["osascript", "-e"])
        self.assertIn('"say \\"hi\\""', command[2])
