"""Database connection settings read from a JSON configuration file."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_FILE = "config/config.json"


class ConfigError(ValueError):
    """The configuration file does not have the expected shape."""


class DBType(enum.Enum):
    MYSQL = "mysql"
    REDIS = "redis"


@dataclass
class DBInfo:
    ip: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    db_name: str = ""


class ConfigReader:
    """Reads database settings from a JSON object file."""

    def __init__(self, file_name: str | Path = DEFAULT_CONFIG_FILE) -> None:
        with open(file_name, encoding="utf-8") as stream:
            try:
                root = json.load(stream)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{file_name}: invalid JSON") from exc
        if not isinstance(root, dict):
            raise ConfigError(f"{file_name}: top level must be an object")
        self._root = root

    def database_info(self, db_type: DBType) -> DBInfo:
        """Settings for the given database; missing values take defaults."""
        node = self._root.get(db_type.value)
        if node is None:
            node = {}
        if not isinstance(node, dict):
            raise ConfigError(f"section {db_type.value!r} must be an object")
        info = DBInfo(ip=str(node.get("ip", "")), port=int(node.get("port", 0)))
        if db_type is DBType.MYSQL:
            info.user = str(node.get("user", ""))
            info.password = str(node.get("password", ""))
            info.db_name = str(node.get("db_name", ""))
        return info