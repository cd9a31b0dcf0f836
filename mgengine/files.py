"""Reading text files and little-endian binary values."""

from __future__ import annotations

import os
import struct
from typing import BinaryIO, List, NoReturn, Union

from .log import Level, fatal, log

PathLike = Union[str, "os.PathLike[str]"]


def _open_failed(path: PathLike, show_cwd: bool) -> NoReturn:
    if show_cwd:
        log(Level.INFO, "Current directory: ", os.getcwd(), engine=True)
    fatal("Unable to open file: ", os.fspath(path))
    raise AssertionError("unreachable")


def _read_lines(path: PathLike, show_cwd: bool) -> List[str]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        _open_failed(path, show_cwd)
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_all_text(path: PathLike) -> str:
    """Return the file's text with every line terminated by a newline."""
    return "".join(line + "\n" for line in _read_lines(path, show_cwd=True))


def load_all_lines(path: PathLike) -> List[str]:
    """Return the file's lines without their newline characters."""
    return _read_lines(path, show_cwd=False)


class BinaryReader:
    """Reads little-endian numbers from a binary stream, counting the bytes read."""

    def __init__(self, stream: BinaryIO, offset: int = 0) -> None:
        self._stream = stream
        self.offset = offset

    def _read(self, fmt: str):
        size = struct.calcsize(fmt)
        chunk = self._stream.read(size)
        if len(chunk) != size:
            raise EOFError(f"expected {size} bytes at offset {self.offset}, got {len(chunk)}")
        self.offset += size
        return struct.unpack(fmt, chunk)[0]

    def read_uint8(self) -> int:
        return self._read("<B")

    def read_uint16(self) -> int:
        return self._read("<H")

    def read_uint32(self) -> int:
        return self._read("<I")

    def read_uint64(self) -> int:
        return self._read("<Q")

    def read_float(self) -> float:
        return self._read("<f")

    def read_double(self) -> float:
        return self._read("<d")