"""Engine identification, string helpers and file-system lookups."""

from __future__ import annotations

import datetime
import os
from typing import Optional

VERSION = "17.1"
ENGINE_NAME = "Stockfish"
_AUTHORS = "the Stockfish developers (see AUTHORS file)"

_C_SPACE = frozenset(" \t\n\v\f\r")
_SIZE_T_MAX = (1 << 64) - 1
_ULLONG_MAX = (1 << 64) - 1


def engine_version_info() -> str:
    """Return the engine name and version; development builds carry a date and 'nogit'."""
    info = f"{ENGINE_NAME} {VERSION}"
    if VERSION == "dev":
        info += "-" + datetime.date.today().strftime("%Y%m%d") + "-nogit"
    return info


def engine_info(to_uci: bool = False) -> str:
    """Return the version line followed by the author line, in UCI form if requested."""
    return engine_version_info() + ("\nid author " if to_uci else " by ") + _AUTHORS


def remove_whitespace(s: str) -> str:
    """Return ``s`` with every ASCII whitespace character removed."""
    return "".join(c for c in s if c not in _C_SPACE)


def is_whitespace(s: str) -> bool:
    """Return True if ``s`` holds only ASCII whitespace (or is empty)."""
    return all(c in _C_SPACE for c in s)


def str_to_size_t(s: str) -> int:
    """Parse a leading unsigned decimal integer from ``s``.

    Leading whitespace and a sign are accepted and trailing text is ignored;
    a minus sign wraps modulo 2**64. Raises ValueError when there are no digits
    and OverflowError when the value does not fit in 64 bits.
    """
    text = s.lstrip("".join(_C_SPACE))
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    digits = ""
    for c in text:
        if not "0" <= c <= "9":
            break
        digits += c
    if not digits:
        raise ValueError(f"invalid integer: {s!r}")
    value = int(digits)
    if value > _ULLONG_MAX:
        raise OverflowError(f"integer out of range: {s!r}")
    if negative:
        value = (-value) & _ULLONG_MAX
    if value > _SIZE_T_MAX:
        raise OverflowError(f"integer out of range: {s!r}")
    return value


def read_file_to_string(path: str) -> Optional[bytes]:
    """Return the file's contents as bytes, or None if it cannot be opened."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError:
        return None


def get_working_directory() -> str:
    """Return the current working directory, or an empty string if unavailable."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def get_binary_directory(argv0: str) -> str:
    """Return the directory of the executable named by ``argv0``, with a trailing separator.

    A path without a directory gives the working directory; a leading "./" is
    replaced by the working directory.
    """
    separator = "\\" if os.name == "nt" else "/"
    working_directory = get_working_directory()

    pos = max(argv0.rfind("\\"), argv0.rfind("/"))
    directory = "." + separator if pos < 0 else argv0[: pos + 1]

    if directory.startswith("." + separator):
        directory = working_directory + directory[1:]
    return directory