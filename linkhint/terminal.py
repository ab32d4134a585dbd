"""Terminal control and key decoding for the interactive hint session.

Owns the raw-mode/alternate-screen lifecycle and turns raw stdin bytes into
key tokens. Escape sequences collapse to ``ESC``; hint selection only needs
printable keys and cancellation.
"""

from __future__ import annotations

import contextlib
import os
import select
import termios
import tty

ESC_SEQUENCE_TIMEOUT_MS = 25


def _drain_escape_sequence(fd: int) -> None:
    """Consume the rest of an escape sequence that is already buffered."""
    while True:
        ready, _, _ = select.select([fd], [], [], ESC_SEQUENCE_TIMEOUT_MS / 1000.0)
        if not ready or not os.read(fd, 1):
            return


def read_key(fd: int) -> str:
    """Block for one key and return its token.

    Returns ``""`` at end of input.
    """
    ch = os.read(fd, 1)
    if not ch:
        return ""
    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\x07":
        return "CTRL_G"
    if ch in {b"\r", b"\n"}:
        return "ENTER"
    if ch == b"\x1b":
        _drain_escape_sequence(fd)
        return "ESC"
    return ch.decode("utf-8", errors="replace")


class TerminalController:
    """Manage terminal mode transitions around the hint overlay."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen, and restore tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw(self, text: str) -> None:
        """Replace the screen contents with ``text``."""
        body = text.replace("\n", "\r\n")
        os.write(self.stdout_fd, ("\x1b[H\x1b[2J" + body).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
