# landlord

Building blocks for the server side of a three-player *Fight the Landlord*
card game: a growable byte buffer with length-prefixed packets, hashing,
Base64 and AES helpers, room and score bookkeeping kept in Redis, a small
MySQL wrapper, and a minimal HTTP/1.1 request parser that serves static
files and directory listings.

## Modules

| Module | Contents |
| --- | --- |
| `landlord.buffer` | `Buffer`: bytes written at one end, consumed at the other; 4-byte big-endian length framing; `socket_read` / `send_data` on socket objects |
| `landlord.config` | `ConfigReader`, `DBInfo`, `DBType`, `ConfigError`, `DEFAULT_CONFIG_FILE`: MySQL and Redis settings from a JSON file |
| `landlord.hashing` | `Hash`, `HashType`, `OutputType`: incremental MD5, SHA-1, SHA-2 and SHA-3 digests, as bytes or lower-case hex |
| `landlord.base64codec` | `encode` (lines of at most 64 characters, each ending in a newline) and `decode` (ignores whitespace, raises `ValueError` on bad input) |
| `landlord.aescrypto` | `AesCrypto`, `Algorithm`: AES in ECB, CBC, CFB, OFB and CTR modes with 128, 192 and 256-bit keys; the IV is the MD5 digest of the key; ECB and CBC use PKCS#7 padding |
| `landlord.mysql_connection` | `MysqlConnection`: connect, `update`, `query` then `next` / `value`, `transaction` / `commit` / `rollback`, and an alive-time clock; usable as a context manager |
| `landlord.room` | `Room`: rooms grouped by fill level (`single_room`, `double_room`, `triple_room`, `invalid_room`), a sorted set of scores per room, the `players` hash and the `RSA` hash, all in Redis |
| `landlord.http_response` | `HttpResponse`, `StatusCode`: status line, headers and body written into a `Buffer` |
| `landlord.http_request` | `HttpRequest`, `ProcessingStatus`, `send_file`, `send_dir`, `decode_url`, `content_type` |

## Requirements

Python 3.10 or later. `landlord.aescrypto` uses `cryptography`;
`landlord.room` needs a reachable Redis server (through `redis`) and
`landlord.mysql_connection` a MySQL server (through `pymysql`).

## Examples

Framing a packet and reading it back:

```python
from landlord.buffer import Buffer

buf = Buffer(1024)
buf.append_package(b"hello")
length = int.from_bytes(buf.take(4), "big")
assert buf.take(length) == b"hello"
```

`Buffer.append` refuses empty data, and `take` / `advance` raise
`ValueError` when asked for more than is readable.

Digests and Base64:

```python
from landlord.hashing import Hash, HashType, OutputType
from landlord.base64codec import encode, decode

digest = Hash(HashType.SHA256)
digest.add_data("abc")
assert digest.result(OutputType.HEX).startswith("ba7816bf")

assert decode(encode(b"payload")) == b"payload"
```

AES round trip:

```python
import os
from landlord.aescrypto import AesCrypto, Algorithm

aes = AesCrypto(Algorithm.AES_CBC_256, os.urandom(32))
assert aes.decrypt(aes.encrypt("three of a kind")) == b"three of a kind"
```

A key of the wrong length for the algorithm raises `ValueError`.

Rooms in Redis (any object with the `redis.Redis` methods can be passed
as the client; `init_environment` connects using the configuration file):

```python
from landlord.room import Room

rooms = Room()
rooms.init_environment("config/config.json")
name = rooms.join_any_room("alice")
rooms.update_player_score(name, "alice", 12)
print(rooms.players_order(name))   # "alice-1-12#"
```

`join_room` returns `False` when a room already holds three players;
`search_room` tells whether a room exists with a free seat.

Answering an HTTP GET from a buffer:

```python
from landlord.buffer import Buffer
from landlord.http_request import HttpRequest
from landlord.http_response import HttpResponse

read_buf, send_buf = Buffer(4096), Buffer(4096)
read_buf.append("GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
HttpRequest().parse_http_request(read_buf, HttpResponse(), send_buf, None)
print(send_buf.peek().decode())   # status line, headers, directory listing
```

Paths are resolved against the current directory; a missing file is
answered with `404 Not Found` and the contents of `404.html`.

## Configuration

`ConfigReader` reads a JSON object (by default `config/config.json`) with
a `mysql` section (`ip`, `port`, `user`, `password`, `db_name`) and a
`redis` section (`ip`, `port`). Missing values take empty or zero
defaults; a file that is not a JSON object raises `ConfigError`.

## What this package does not do

It contains no network server: there is no event loop, no I/O
dispatcher, no worker threads and no command to start anything. The
game-side request handling is not included either: there is no RSA key
exchange or signing, no in-process map of rooms to connected players,
and no dealing of cards. `Buffer` and `HttpRequest` work on buffers and
socket objects you supply.

## Tests

The tests use pytest, installed through the `test` extra.