"""HTTP response head and body assembly into a send buffer."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .buffer import Buffer

SendDataFunc = Callable[[str, Buffer, Any], None]


class StatusCode(enum.IntEnum):
    UNKNOWN = 0
    OK = 200
    MOVED_PERMANENTLY = 301
    MOVED_TEMPORARILY = 302
    BAD_REQUEST = 400
    NOT_FOUND = 404


_REASONS = {
    StatusCode.OK: "OK",
    StatusCode.MOVED_PERMANENTLY: "Moved Permanently",
    StatusCode.MOVED_TEMPORARILY: "Moved Temporarily",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.NOT_FOUND: "Not Found",
}


class HttpResponse:
    """Status, headers and the function that writes the body."""

    def __init__(self) -> None:
        self.status_code: StatusCode = StatusCode.UNKNOWN
        self.file_name: str = ""
        self.headers: dict[str, str] = {}
        self.send_data_func: Optional[SendDataFunc] = None

    def add_header(self, key: str, value: str) -> None:
        """Add a header; empty keys or values are ignored, the first value wins."""
        if not key or not value:
            return
        self.headers.setdefault(key, value)

    def prepare_msg(self, send_buf: Buffer, sock: Any) -> None:
        """Write the status line, headers and body into ``send_buf``."""
        reason = _REASONS.get(int(self.status_code))
        if reason is None:
            raise ValueError(f"no reason phrase for status {int(self.status_code)}")
        if self.send_data_func is None:
            raise RuntimeError("response has no body writer")
        send_buf.append(f"HTTP/1.1 {int(self.status_code)} {reason}\r\n")
        for key in sorted(self.headers):
            send_buf.append(f"{key}: {self.headers[key]}\r\n")
        send_buf.append("\r\n")
        self.send_data_func(self.file_name, send_buf, sock)