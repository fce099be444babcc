"""Incremental HTTP request parsing and static file serving."""

from __future__ import annotations

import enum
import os
import re
import stat
from typing import Any

from .buffer import Buffer
from .http_response import HttpResponse, StatusCode

_CHUNK = 1024
_PERCENT = re.compile(rb"%([0-9A-Fa-f]{2})")
_TEXT_PLAIN = "text/plain; charset=utf-8"
_CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".htm": "text/html; charset=utf-8",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".png": "image/png",
    ".css": "text/css",
    ".au": "audio/basic",
    ".wav": "audio/wav",
    ".avi": "video/x-msvideo",
    ".midi": "audio/midi",
    ".mid": "audio/midi",
    ".mp3": "audio/mpeg",
    ".mov": "video/quicktime",
    ".qt": "video/quicktime",
    ".mpeg": "video/mpeg",
    ".mpe": "video/mpeg",
    ".vrml": "model/vrml",
    ".vrl": "model/vrml",
    ".ogg": "application/ogg",
    ".pac": "application/x-ns-proxy-autoconfig",
}


class ProcessingStatus(enum.Enum):
    PARSE_REQ_LINE = "line"
    PARSE_REQ_HEADERS = "headers"
    PARSE_REQ_BODY = "body"
    PARSE_REQ_DONE = "done"


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


def decode_url(msg: str) -> str:
    """Replace %XX escapes with the bytes they stand for."""
    raw = msg.encode("utf-8", errors="surrogateescape")
    decoded = _PERCENT.sub(lambda match: bytes([int(match.group(1), 16)]), raw)
    return _text(decoded)


def content_type(file_name: str) -> str:
    """Content type chosen by the text after the last dot of the name."""
    dot = file_name.rfind(".")
    if dot == -1:
        return _TEXT_PLAIN
    return _CONTENT_TYPES.get(file_name[dot:].lower(), _TEXT_PLAIN)


def _entry_size(path: str) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        return os.lstat(path).st_size


def send_dir(dir_name: str, send_buf: Buffer, sock: Any) -> None:
    """Write an HTML table listing the directory into ``send_buf``."""
    names = sorted([".", ".."] + os.listdir(dir_name))
    send_buf.append(f"<html><head><title>{dir_name}</title></head><body><table>")
    for name in names:
        sub_path = f"{dir_name}/{name}"
        size = _entry_size(sub_path)
        href = f"{name}/" if os.path.isdir(sub_path) else name
        send_buf.append(f'<tr><td><a href="{href}">{name}</a></td><td>{size}</td></tr>')
    send_buf.append("</table></body></html>")


def send_file(file_name: str, send_buf: Buffer, sock: Any) -> None:
    """Copy the file's contents into ``send_buf``."""
    with open(file_name, "rb") as stream:
        while chunk := stream.read(_CHUNK):
            send_buf.append(chunk)


class HttpRequest:
    """State machine that parses a request from a buffer and answers it."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.status = ProcessingStatus.PARSE_REQ_LINE
        self.method = ""
        self.url = ""
        self.version = ""
        self.headers: dict[str, str] = {}

    def add_header(self, key: str, value: str) -> None:
        """Add a header; empty keys or values are ignored, the first value wins."""
        if not key or not value:
            return
        self.headers.setdefault(key, value)

    def get_header(self, key: str) -> str:
        return self.headers.get(key, "")

    def parse_request_line(self, read_buf: Buffer) -> bool:
        """Parse 'METHOD URL VERSION'; False until a whole non-empty line is there."""
        end = read_buf.find_crlf()
        if end is None or end <= 0:
            return False
        line = _text(read_buf.peek()[:end])
        parts = line.split(" ", 2)
        if len(parts) < 3:
            raise ValueError(f"malformed request line: {line!r}")
        self.method, self.url, self.version = parts
        read_buf.advance(end + 2)
        self.status = ProcessingStatus.PARSE_REQ_HEADERS
        return True

    def parse_request_header(self, read_buf: Buffer) -> bool:
        """Parse one header line; a line without ': ' ends the headers."""
        end = read_buf.find_crlf()
        if end is None:
            return False
        line = read_buf.peek()[:end]
        middle = line.find(b": ")
        if middle == -1:
            read_buf.advance(end + 2)
            self.status = ProcessingStatus.PARSE_REQ_DONE
            return True
        key, value = line[:middle], line[middle + 2:]
        if key and value:
            self.add_header(_text(key), _text(value))
        read_buf.advance(end + 2)
        return True

    def parse_http_request(
        self, read_buf: Buffer, response: HttpResponse, send_buf: Buffer, sock: Any
    ) -> bool:
        """Parse as far as the buffer allows; answer once the request is complete."""
        while self.status is not ProcessingStatus.PARSE_REQ_DONE:
            if self.status is ProcessingStatus.PARSE_REQ_LINE:
                parsed = self.parse_request_line(read_buf)
            elif self.status is ProcessingStatus.PARSE_REQ_HEADERS:
                parsed = self.parse_request_header(read_buf)
            else:
                raise RuntimeError("request bodies are not supported")
            if not parsed:
                return False
        self.process_http_request(response)
        response.prepare_msg(send_buf, sock)
        self.status = ProcessingStatus.PARSE_REQ_LINE
        return True

    def process_http_request(self, response: HttpResponse) -> bool:
        """Fill in the response for a GET of a file or directory; False for other methods."""
        if self.method.lower() != "get":
            return False
        self.url = decode_url(self.url)
        file = "./" if self.url == "/" else self.url[1:]
        try:
            info = os.stat(file)
        except OSError:
            response.file_name = "404.html"
            response.status_code = StatusCode.NOT_FOUND
            response.add_header("Content-type", content_type(".html"))
            response.send_data_func = send_file
            return True
        response.file_name = file
        response.status_code = StatusCode.OK
        if stat.S_ISDIR(info.st_mode):
            response.add_header("Content-type", content_type(".html"))
            response.send_data_func = send_dir
        else:
            response.add_header("Content-type", content_type(file))
            response.add_header("Content-length", str(info.st_size))
            response.send_data_func = send_file
        return True