"""Keyboard input for the TUI: raw terminal bytes in, key names out."""

from __future__ import annotations

import os
import selectors
import sys
import termios
import tty
from types import TracebackType

ESC = "\x1b"

# How long to wait for the rest of an escape sequence, in seconds
_SEQUENCE_TIMEOUT = 0.02
# Longest CSI parameter run we bother collecting
_MAX_SEQUENCE = 16

# Single control bytes
_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}

# Final byte of a CSI/SS3 sequence (``\x1b[A``, ``\x1b[1;5A``, ``\x1bOH``)
_FINAL_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# First parameter of a ``\x1b[<n>~`` sequence
_TILDE_KEYS = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageup",
    "6": "pagedown",
    "7": "home",
    "8": "end",
}

UNKNOWN = "unknown"


def translate_key(ch: str) -> str:
    """Map a single byte read from the terminal to a key name."""
    return _CONTROL_KEYS.get(ch, ch)


def decode_escape(seq: str) -> str:
    """Map the bytes that followed ``\\x1b`` to a key name.

    A bare ESC is ``"escape"``. Sequences we do not know, such as
    function keys, come back as ``"unknown"`` so they never act as ESC.
    """
    if not seq:
        return "escape"
    if seq[0] == "O" and len(seq) == 2:
        return _FINAL_KEYS.get(seq[1], UNKNOWN)
    if seq[0] != "[" or len(seq) < 2:
        return UNKNOWN

    final = seq[-1]
    if final == "~":
        param = seq[1:-1].split(";", 1)[0]
        return _TILDE_KEYS.get(param, UNKNOWN)
    return _FINAL_KEYS.get(final, UNKNOWN)


def is_final_byte(ch: str) -> bool:
    """True for the byte that terminates a CSI sequence (``@`` to ``~``)."""
    return "\x40" <= ch <= "\x7e"


class KeyboardInput:
    """Cbreak-mode stdin reader, used as a context manager.

    ``read`` returns one key name per call, or None when nothing arrived
    within the timeout. Bytes are pulled with ``os.read`` one at a time
    so the selector keeps seeing the tail of a partly read escape
    sequence.
    """

    def __init__(self) -> None:
        self._fd: int = sys.stdin.fileno()
        self._saved_attrs: list | None = None
        self._selector = selectors.DefaultSelector()

    def __enter__(self) -> KeyboardInput:
        self._saved_attrs = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        self._selector.register(self._fd, selectors.EVENT_READ)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._selector.unregister(self._fd)
        self._selector.close()
        if self._saved_attrs is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)

    def read(self, timeout: float = 0.05) -> str | None:
        ch = self._next_char(timeout)
        if ch is None:
            return None
        if ch != ESC:
            return translate_key(ch)
        return decode_escape(self._collect_sequence())

    def _next_char(self, timeout: float) -> str | None:
        if not self._selector.select(timeout=timeout):
            return None
        return os.read(self._fd, 1).decode("utf-8", errors="replace")

    def _collect_sequence(self) -> str:
        """Read what follows ESC up to the end of the sequence.

        CSI (``[``) runs until its final byte, SS3 (``O``) takes one more
        byte, anything else is a single byte.
        """
        lead = self._next_char(_SEQUENCE_TIMEOUT)
        if lead is None:
            return ""
        seq = lead
        if lead == "O":
            tail = self._next_char(_SEQUENCE_TIMEOUT)
            return seq + (tail or "")
        if lead != "[":
            return seq

        while len(seq) < _MAX_SEQUENCE:
            ch = self._next_char(_SEQUENCE_TIMEOUT)
            if ch is None:
                break
            seq += ch
            if is_final_byte(ch):
                break
        return seq
