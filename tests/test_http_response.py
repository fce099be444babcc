import pytest

from landlord.buffer import Buffer
from landlord.http_response import HttpResponse, StatusCode


def _body_writer(calls):
    def write(file_name, send_buf, sock):
        calls.append((file_name, sock))
        send_buf.append(b"BODY")

    return write


def test_prepare_msg_writes_head_then_body():
    calls = []
    response = HttpResponse()
    response.status_code = StatusCode.OK
    response.file_name = "index.html"
    response.add_header("Content-type", "text/html; charset=utf-8")
    response.send_data_func = _body_writer(calls)
    buf = Buffer(16)
    response.prepare_msg(buf, None)
    assert buf.peek() == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-type: text/html; charset=utf-8\r\n"
        b"\r\nBODY"
    )
    assert calls == [("index.html", None)]


def test_headers_are_written_in_key_order():
    response = HttpResponse()
    response.status_code = StatusCode.NOT_FOUND
    response.add_header("Content-type", "a")
    response.add_header("Content-length", "b")
    response.send_data_func = _body_writer([])
    buf = Buffer(8)
    response.prepare_msg(buf, None)
    text = buf.peek()
    assert text.startswith(b"HTTP/1.1 404 Not Found\r\n")
    assert text.index(b"Content-length") < text.index(b"Content-type")


def test_add_header_ignores_empty_and_keeps_first():
    response = HttpResponse()
    response.add_header("", "x")
    response.add_header("Key", "")
    response.add_header("Key", "first")
    response.add_header("Key", "second")
    assert response.headers == {"Key": "first"}


@pytest.mark.parametrize(
    "code, line",
    [
        (StatusCode.MOVED_PERMANENTLY, b"HTTP/1.1 301 Moved Permanently\r\n"),
        (StatusCode.MOVED_TEMPORARILY, b"HTTP/1.1 302 Moved Temporarily\r\n"),
        (StatusCode.BAD_REQUEST, b"HTTP/1.1 400 Bad Request\r\n"),
    ],
)
def test_status_lines(code, line):
    response = HttpResponse()
    response.status_code = code
    response.send_data_func = _body_writer([])
    buf = Buffer(8)
    response.prepare_msg(buf, None)
    assert buf.peek() == line + b"\r\nBODY"


def test_unknown_status_raises():
    response = HttpResponse()
    response.send_data_func = _body_writer([])
    with pytest.raises(ValueError):
        response.prepare_msg(Buffer(8), None)


def test_missing_body_writer_raises():
    response = HttpResponse()
    response.status_code = StatusCode.OK
    buf = Buffer(8)
    with pytest.raises(RuntimeError):
        response.prepare_msg(buf, None)
    assert buf.readable_size() == 0