import socket
import struct

import pytest

from landlord.buffer import Buffer


def test_new_buffer_sizes():
    buf = Buffer(16)
    assert buf.readable_size() == 0
    assert buf.writable_size() == 16


def test_invalid_size():
    with pytest.raises(ValueError):
        Buffer(0)


def test_append_and_take_round_trip():
    buf = Buffer(8)
    buf.append(b"hello")
    assert buf.readable_size() == 5
    assert buf.take(5) == b"hello"
    assert buf.readable_size() == 0


def test_append_text_is_utf8():
    buf = Buffer(4)
    buf.append("héllo")
    assert buf.peek() == "héllo".encode("utf-8")


def test_append_empty_raises():
    buf = Buffer(4)
    with pytest.raises(ValueError):
        buf.append(b"")


def test_growth_keeps_data():
    buf = Buffer(4)
    buf.append(b"abcdef")
    buf.append(b"ghij")
    assert buf.peek() == b"abcdefghij"
    assert buf.capacity >= 10


def test_extend_room_compacts_before_growing():
    buf = Buffer(8)
    buf.append(b"abcdef")
    buf.take(4)
    capacity = buf.capacity
    buf.append(b"wxyz")
    assert buf.capacity == capacity
    assert buf.peek() == b"efwxyz"


def test_append_head_is_big_endian():
    buf = Buffer(4)
    buf.append_head(5)
    assert buf.peek() == b"\x00\x00\x00\x05"


def test_append_package_round_trip():
    buf = Buffer(4)
    buf.append_package(b"payload")
    (length,) = struct.unpack("!i", buf.take(4))
    assert buf.take(length) == b"payload"


def test_find_crlf_offset():
    buf = Buffer(32)
    buf.append(b"GET / HTTP/1.1\r\nHost")
    assert buf.find_crlf() == len(b"GET / HTTP/1.1")
    buf.advance(buf.find_crlf() + 2)
    assert buf.find_crlf() is None
    assert buf.peek() == b"Host"


def test_take_too_much_raises():
    buf = Buffer(4)
    buf.append(b"ab")
    with pytest.raises(ValueError):
        buf.take(3)


def test_advance_returns_read_position():
    buf = Buffer(8)
    buf.append(b"abcd")
    assert buf.advance(3) == 3
    assert buf.peek() == b"d"
    with pytest.raises(ValueError):
        buf.advance(2)


def test_socket_round_trip():
    left, right = socket.socketpair()
    with left, right:
        out = Buffer(4)
        out.append_package(b"game data")
        sent = out.send_data(left)
        assert sent == 4 + len(b"game data")
        assert out.readable_size() == 0
        assert out.send_data(left) == 0

        incoming = Buffer(2)
        count = incoming.socket_read(right)
        assert count == sent
        assert incoming.take(4) == struct.pack("!i", 9)
        assert incoming.take(9) == b"game data"


def test_socket_read_closed_peer_returns_zero():
    left, right = socket.socketpair()
    with right:
        left.close()
        buf = Buffer(4)
        assert buf.socket_read(right) == 0
        assert buf.readable_size() == 0