"""Game rooms and player scores kept in Redis."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

import redis

from .config import DEFAULT_CONFIG_FILE, ConfigReader, DBType

_log = logging.getLogger(__name__)

SINGLE_ROOM = "single_room"
DOUBLE_ROOM = "double_room"
TRIPLE_ROOM = "triple_room"
INVALID_ROOM = "invalid_room"
ROOM_CAPACITY = 3


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


class Room:
    """Room membership: sets of rooms by fill level and a sorted set of scores per room."""

    def __init__(self, client: Any = None) -> None:
        self._client = client

    @property
    def _redis(self) -> Any:
        if self._client is None:
            raise RuntimeError("redis client is not initialised")
        return self._client

    def init_environment(self, config_file: str | Path = DEFAULT_CONFIG_FILE) -> bool:
        """Connect to the Redis server named in the configuration file."""
        info = ConfigReader(config_file).database_info(DBType.REDIS)
        self._client = redis.Redis(host=info.ip, port=info.port, decode_responses=True)
        try:
            alive = bool(self._client.ping())
        except redis.RedisError:
            return False
        if alive:
            _log.debug("Connect to redis successfully!")
        return alive

    def clear(self) -> None:
        self._redis.flushdb()

    def save_rsa_key(self, field: str, value: str) -> None:
        self._redis.hset("RSA", field, value)

    def rsa_key(self, field: str) -> str:
        value = self._redis.hget("RSA", field)
        return "" if value is None else _text(value)

    def join_any_room(self, user_name: str) -> str:
        """Join the fullest open room, or a new one; return its name."""
        if self._redis.scard(DOUBLE_ROOM) > 0:
            room_name = _text(self._redis.srandmember(DOUBLE_ROOM))
        elif self._redis.scard(SINGLE_ROOM) > 0:
            room_name = _text(self._redis.srandmember(SINGLE_ROOM))
        else:
            room_name = self.new_room_name()
        self.join_room(room_name, user_name)
        return room_name

    def join_room(self, room_name: str, user_name: str) -> bool:
        """Join a given room; False when it is full."""
        client = self._redis
        if client.zcard(room_name) >= ROOM_CAPACITY:
            return False
        if client.exists(room_name) == 0:
            client.sadd(SINGLE_ROOM, room_name)
        elif client.sismember(SINGLE_ROOM, room_name):
            client.smove(SINGLE_ROOM, DOUBLE_ROOM, room_name)
        elif client.sismember(DOUBLE_ROOM, room_name):
            client.smove(DOUBLE_ROOM, TRIPLE_ROOM, room_name)
        else:
            raise RuntimeError(f"room {room_name!r} is in no joinable state")
        client.zadd(room_name, {user_name: 0})
        client.hset("players", user_name, room_name)
        return True

    @staticmethod
    def new_room_name() -> str:
        """A random six-digit room name."""
        return str(random.randint(100000, 999999))

    def nums_players(self, room_name: str) -> int:
        return int(self._redis.zcard(room_name))

    def update_player_score(self, room_name: str, user_name: str, score: int) -> None:
        self._redis.zadd(room_name, {user_name: score})

    def player_room_name(self, user_name: str) -> str:
        value = self._redis.hget("players", user_name)
        return "" if value is None else _text(value)

    def player_score(self, room_name: str, user_name: str) -> int:
        score = self._redis.zscore(room_name, user_name)
        return 0 if score is None else int(score)

    def players_order(self, room_name: str) -> str:
        """Players by descending score as 'name-position-score#' entries."""
        entries = self._redis.zrevrange(room_name, 0, -1, withscores=True)
        return "".join(
            f"{_text(user_name)}-{position}-{int(score)}#"
            for position, (user_name, score) in enumerate(entries, start=1)
        )

    def leave_room(self, room_name: str, user_name: str) -> None:
        client = self._redis
        if client.sismember(TRIPLE_ROOM, room_name):
            client.smove(TRIPLE_ROOM, INVALID_ROOM, room_name)
        client.zrem(room_name, user_name)
        if client.zcard(room_name) == 0:
            client.delete(room_name)
            client.srem(INVALID_ROOM, room_name)

    def search_room(self, room_name: str) -> bool:
        """Whether the room exists and still has a free seat."""
        client = self._redis
        return bool(client.sismember(DOUBLE_ROOM, room_name) or client.sismember(SINGLE_ROOM, room_name))