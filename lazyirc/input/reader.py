"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` tokens.
Handles ESC-sequence timing, CSI and SS3 sequences, and multi-byte UTF-8.
"""

from __future__ import annotations

import os
import select

from .events import KeyEvent, press

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS = {
    "A": "UP",
    "B": "DOWN",
    "C": "RIGHT",
    "D": "LEFT",
    "H": "HOME",
    "F": "END",
    "Z": "SHIFT_TAB",
    "P": "F1",
    "Q": "F2",
    "R": "F3",
    "S": "F4",
}
_CSI_TILDE_KEYS = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
    "11": "F1",
    "12": "F2",
    "13": "F3",
    "14": "F4",
    "15": "F5",
    "17": "F6",
    "18": "F7",
    "19": "F8",
    "20": "F9",
    "21": "F10",
    "23": "F11",
    "24": "F12",
}
_SS3_KEYS = {
    "A": "UP",
    "B": "DOWN",
    "C": "RIGHT",
    "D": "LEFT",
    "H": "HOME",
    "F": "END",
    "P": "F1",
    "Q": "F2",
    "R": "F3",
    "S": "F4",
}
# xterm modifier parameter: 1 + (shift | alt << 1 | ctrl << 2).
_MODIFIER_PREFIXES = {
    "1": "",
    "2": "SHIFT_",
    "3": "ALT_",
    "5": "CTRL_",
    "6": "CTRL_SHIFT_",
}
CSI_MAX_LENGTH = 32
UNKNOWN_KEY = "UNKNOWN"
NO_KEY = press("")


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_utf8(fd: int, lead: bytes) -> str:
    data = bytearray(lead)
    for _ in range(_utf8_length(lead[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data.extend(nxt)
    return data.decode("utf-8", errors="replace")


def _decode_control(ch: bytes) -> str | None:
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch in {b"\r", b"\n"}:
        return "ENTER"
    code = ch[0]
    if 1 <= code <= 26:
        return f"CTRL_{chr(code + 64)}"
    return None


def _read_csi(fd: int) -> tuple[str, str] | None:
    """Read CSI parameter and intermediate bytes up to the final byte.

    Returns ``(params, final)`` or ``None`` when the sequence is cut short,
    malformed or longer than ``CSI_MAX_LENGTH``.
    """
    params = bytearray()
    while len(params) < CSI_MAX_LENGTH:
        ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if ch is None:
            return None
        code = ch[0]
        if 0x40 <= code <= 0x7E:
            return params.decode("ascii"), ch.decode("ascii")
        if not 0x20 <= code <= 0x3F:
            return None
        params.extend(ch)
    return None


def _decode_csi(fd: int) -> str:
    parsed = _read_csi(fd)
    if parsed is None:
        return UNKNOWN_KEY
    params, final = parsed
    fields = params.split(";")
    modifier = _MODIFIER_PREFIXES.get(fields[1]) if len(fields) == 2 else ""
    if modifier is None or len(fields) > 2:
        return UNKNOWN_KEY
    if final == "~":
        base = _CSI_TILDE_KEYS.get(fields[0])
    elif fields[0] in {"", "1"}:
        base = _CSI_FINAL_KEYS.get(final)
    else:
        base = None
    if base is None:
        return UNKNOWN_KEY
    return modifier + base


def _decode_ss3(fd: int) -> str:
    ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if ch is None:
        return UNKNOWN_KEY
    return _SS3_KEYS.get(ch.decode("latin-1"), UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> KeyEvent:
    """Read one key from ``fd``.

    Returns a press event with an empty key on timeout and raises
    ``EOFError`` when the stream is closed. Raw terminals only report
    presses, so every decoded key is a ``PRESS`` event. Escape sequences
    are consumed whole; ones without a token decode to ``UNKNOWN``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return NO_KEY

        ch = os.read(fd, 1)
        if not ch:
            raise EOFError("input stream closed")

    if ch != b"\x1b":
        control = _decode_control(ch)
        if control is not None:
            return press(control)
        return press(_decode_utf8(fd, ch))

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return press("ESC")
    if seq == b"[":
        return press(_decode_csi(fd))
    if seq == b"O":
        return press(_decode_ss3(fd))
    _PENDING_BYTES.append(seq)
    return press("ESC")
