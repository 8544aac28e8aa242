from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "uniconnect")),
        )


class DatabaseConnection:
    """Opens one short-lived MySQL connection per repository call.

    ``get_instance`` hands out one factory per distinct config, so the app and
    the bootstrap scripts can point at different schemas in the same process.
    """

    _instances: Dict[DBConfig, "DatabaseConnection"] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if config not in cls._instances:
            cls._instances[config] = cls(config)
        return cls._instances[config]

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self, *, with_database: bool = True):
        """``with_database=False`` connects to the server only, for ``CREATE DATABASE``."""
        params = {
            "host": self._config.host,
            "port": self._config.port,
            "user": self._config.user,
            "password": self._config.password,
            "charset": "utf8mb4",
            "use_pure": True,
        }
        if with_database:
            params["database"] = self._config.database
        return mysql.connector.connect(**params)
