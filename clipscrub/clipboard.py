"""Clipboard read/write boundary via pyperclip."""

import pyperclip

from .log import logger


class ClipboardError(RuntimeError):
    """Raised when the clipboard cannot be read or written."""

    pass


class NoTextAvailable(ClipboardError):
    """Raised when the clipboard holds no text to scrub."""

    pass


def read_text() -> str:
    """Return the current clipboard text or raise NoTextAvailable."""

    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise NoTextAvailable(f"clipboard is not readable: {exc}") from exc
    if not isinstance(text, str) or not text:
        raise NoTextAvailable("clipboard holds no text")
    logger.debug("read %d chars from clipboard", len(text))
    return text


def write_text(text: str) -> None:
    """Replace the clipboard contents with text."""

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"clipboard is not writable: {exc}") from exc
    logger.debug("wrote %d chars to clipboard", len(text))
