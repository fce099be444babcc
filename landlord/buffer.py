"""Growable byte buffer with separate read and write positions."""

from __future__ import annotations

import logging
import struct

_log = logging.getLogger(__name__)

_HEAD = struct.Struct("!i")
_EXTRA_READ = 40960


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Buffer:
    """A byte buffer that is written at one end and consumed at the other."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self._data = bytearray(size)
        self._read_pos = 0
        self._write_pos = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self.readable_size()

    def readable_size(self) -> int:
        return self._write_pos - self._read_pos

    def writable_size(self) -> int:
        return len(self._data) - self._write_pos

    def extend_room(self, size: int) -> None:
        """Make sure at least ``size`` bytes can be written."""
        if self.writable_size() >= size:
            return
        if self._read_pos + self.writable_size() >= size:
            readable = self.readable_size()
            self._data[:readable] = self._data[self._read_pos:self._write_pos]
            self._read_pos = 0
            self._write_pos = readable
        else:
            self._data.extend(bytes(size))

    def append(self, data: bytes | bytearray | memoryview | str) -> None:
        """Append bytes (or UTF-8 text) to the writable end."""
        payload = _as_bytes(data)
        if not payload:
            raise ValueError("cannot append empty data")
        size = len(payload)
        self.extend_room(size)
        self._data[self._write_pos:self._write_pos + size] = payload
        self._write_pos += size

    def append_head(self, length: int) -> None:
        """Append a 4-byte big-endian length header."""
        _log.debug("Append head len: %d", length)
        self.append(_HEAD.pack(length))

    def append_package(self, data: bytes | bytearray | memoryview | str) -> None:
        """Append a length-prefixed package."""
        payload = _as_bytes(data)
        self.append_head(len(payload))
        if payload:
            self.append(payload)

    def socket_read(self, sock) -> int:
        """Read what the socket has available; return the number of bytes read."""
        chunk = sock.recv(self.writable_size() + _EXTRA_READ)
        if chunk:
            self.append(chunk)
        return len(chunk)

    def find_crlf(self) -> int | None:
        """Offset of the first CRLF in the readable data, or None."""
        index = self._data.find(b"\r\n", self._read_pos, self._write_pos)
        if index == -1:
            return None
        return index - self._read_pos

    def send_data(self, sock) -> int:
        """Send the readable data; return the number of bytes sent."""
        if self.readable_size() <= 0:
            return 0
        count = sock.send(self._data[self._read_pos:self._write_pos])
        if count > 0:
            self._read_pos += count
        return count

    def peek(self) -> bytes:
        """The readable data, without consuming it."""
        return bytes(self._data[self._read_pos:self._write_pos])

    def take(self, length: int) -> bytes:
        """Consume and return ``length`` bytes."""
        if length < 0 or length > self.readable_size():
            raise ValueError(f"cannot take {length} bytes from {self.readable_size()} readable")
        chunk = bytes(self._data[self._read_pos:self._read_pos + length])
        self._read_pos += length
        return chunk

    def advance(self, count: int) -> int:
        """Skip ``count`` readable bytes; return the new read position."""
        if count < 0 or count > self.readable_size():
            raise ValueError(f"cannot advance {count} bytes over {self.readable_size()} readable")
        self._read_pos += count
        return self._read_pos