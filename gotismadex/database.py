"""MySQL connection management for the application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import pymysql

from gotismadex.config import Config, app_config
from gotismadex.logger import get_logger

_ENDPOINT = "database"


@dataclass
class DatabaseSettings:
    """Connection settings for the MySQL server and the application database."""

    user: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    name: str = ""
    extra: str = ""

    @classmethod
    def from_config(cls, config: Config) -> DatabaseSettings:
        """Build settings; the password comes from the environment variable the config names."""
        return cls(
            user=config.userdb,
            password=os.environ.get(config.passdb, "") if config.passdb else "",
            host=config.ipdb,
            port=config.portdb,
            name=config.namedb,
            extra=config.extradb,
        )

    @property
    def dsn(self) -> str:
        """Connection string naming the application database."""
        return f"{self.user}:{self.password}@tcp({self.host}:{self.port})/{self.name}{self.extra}"

    def connect_kwargs(self, with_database: bool) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "host": self.host,
            "port": int(self.port or 3306),
            "user": self.user,
            "password": self.password,
        }
        if with_database:
            kwargs["database"] = self.name
        return kwargs


_settings: DatabaseSettings | None = None
_connection: Any = None


def _connect(settings: DatabaseSettings, with_database: bool = True) -> Any:
    return pymysql.connect(**settings.connect_kwargs(with_database))


def _init_schema(settings: DatabaseSettings) -> None:
    log = get_logger()
    try:
        server = _connect(settings, with_database=False)
        try:
            with server.cursor() as cursor:
                cursor.execute("CREATE DATABASE IF NOT EXISTS " + settings.name + ";")
        finally:
            server.close()
    except pymysql.MySQLError as exc:
        log.critical(_ENDPOINT, "create database got a problem.", exc)
    else:
        log.info(_ENDPOINT, "database successfully init.")


def database_init(config: Config | None = None) -> Any:
    """Create the application database if needed and connect to it."""
    global _settings, _connection
    _settings = DatabaseSettings.from_config(config if config is not None else app_config())
    _init_schema(_settings)
    try:
        _connection = _connect(_settings)
    except pymysql.MySQLError as exc:
        get_logger().critical(_ENDPOINT, "connection with database got a problem.", exc)
    else:
        get_logger().info(_ENDPOINT, "Database is connected.")
    return _connection


def db() -> Any:
    """Return the database connection, reconnecting if it no longer answers."""
    global _connection
    if _connection is None or _settings is None:
        raise RuntimeError("database is not initialised")
    log = get_logger()
    try:
        _connection.ping(reconnect=False)
    except pymysql.MySQLError as exc:
        log.warning(_ENDPOINT, "reconnect to db.", exc)
        try:
            _connection = _connect(_settings)
        except pymysql.MySQLError as reconnect_exc:
            log.critical(_ENDPOINT, "reconnection with database got a problem.", reconnect_exc)
        else:
            log.info(_ENDPOINT, "database is reconnected.")
    return _connection