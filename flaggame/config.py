"""Reading numeric settings from a plain-text config file, and log appends."""

from __future__ import annotations

import contextlib
import os
from typing import Iterator

_LINE_LIMIT = 255


def _wrap_int32(value: int) -> int:
    value %= 1 << 32
    return value - (1 << 32) if value >= (1 << 31) else value


def _chunks(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield lines as a fixed-size line reader would: at most 255 characters each."""
    with open(path, encoding="latin-1", newline="") as fh:
        for line in fh:
            for start in range(0, len(line), _LINE_LIMIT):
                yield line[start:start + _LINE_LIMIT]


def get_config(path: str | os.PathLike[str], name: str) -> int:
    """Return the integer after '=' on the first line mentioning ``name``.

    A missing file, a missing key, or a value not starting with a digit
    or '-' gives 0. Only leading decimal digits are read, so a value that
    starts with '-' yields 0.
    """
    try:
        lines = _chunks(path)
        for line in lines:
            if name not in line:
                continue
            _, sep, rest = line.partition("=")
            if not sep:
                return 0
            if not rest or not (rest[0].isdigit() or rest[0] == "-"):
                return 0
            result = 0
            for ch in rest:
                if not ("0" <= ch <= "9"):
                    break
                result = _wrap_int32(result * 10 + ord(ch) - ord("0"))
            return result
    except FileNotFoundError:
        return 0
    return 0


def append_log(path: str | os.PathLike[str], text: str) -> None:
    """Append ``text`` to the log file; failures to open it are ignored."""
    with contextlib.suppress(OSError):
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(text)