"""Health, status and profile endpoints of the API."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any

import pymysql
from flask import Flask, Response, request

from gotismadex.config import Config, app_config
from gotismadex.database import db
from gotismadex.docs import get_version
from gotismadex.logger import get_logger
from gotismadex.router import SecureRouter, get_app, get_secure_router

_ENDPOINT = "health"
_MESSAGE = "Gotisma is feeling API today :)"
_CONTENT_TYPE = "application/json;charset=UTF-8"
_DB_OK = "everything is awesome <3"

# Field names exposed by the profile endpoint, paired with the configuration attribute.
_PROFILE_FIELDS = (
    ("ConfPath", "conf_path"),
    ("Userdb", "userdb"),
    ("Passdb", "passdb"),
    ("Ipdb", "ipdb"),
    ("Portdb", "portdb"),
    ("Namedb", "namedb"),
    ("Extradb", "extradb"),
    ("PortApi", "portapi"),
    ("Loglevel", "loglevel"),
    ("Usersapi", "usersapi"),
    ("Tokensapi", "tokensapi"),
    ("Specimen", "specimen"),
    ("Nameapi", "nameapi"),
    ("Country", "country"),
)

_HTML_SAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


@dataclass
class Health:
    """Body of the health endpoint."""

    title: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Status:
    """Body of the status endpoint."""

    title: str
    name: str
    version: str
    message: str
    dbstatus: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def get_health() -> Health:
    """Return the health message."""
    return Health(title="IT works !", message=_MESSAGE)


def get_status() -> Status:
    """Return the API status, including whether the database answers."""
    status = Status(
        title="Status",
        name=app_config().nameapi,
        version=get_version(),
        message=_MESSAGE,
    )
    try:
        db().ping(reconnect=False)
    except (pymysql.MySQLError, RuntimeError) as exc:
        get_logger().critical(_ENDPOINT, "status db failed.", exc, exit=False)
        status.dbstatus = f"failed : {exc}"
    else:
        status.dbstatus = _DB_OK
    return status


def _profile(config: Config) -> dict[str, Any]:
    return {key: getattr(config, attr) for key, attr in _PROFILE_FIELDS}


def _request_uri() -> str:
    query = request.query_string.decode("latin-1")
    return request.path + ("?" + query if query else "")


def _json_response(payload: dict[str, Any]) -> Response:
    log = get_logger()
    try:
        body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        log.error(_ENDPOINT, "problem with encoder.", exc)
        return Response("", status=200, content_type=_CONTENT_TYPE)
    log.info(_ENDPOINT, "request GET : " + _request_uri())
    return Response(body.translate(_HTML_SAFE) + "\n", status=200, content_type=_CONTENT_TYPE)


def healths_check() -> Response:
    """Answer GET /health."""
    return _json_response(get_health().to_dict())


def status_check() -> Response:
    """Answer GET /auth/status."""
    return _json_response(get_status().to_dict())


def profile_check() -> Response:
    """Answer GET /auth/profile with the current configuration."""
    return _json_response(_profile(app_config()))


def init_routes(app: Flask, secure: SecureRouter) -> None:
    """Register the health routes on the application and the secure router."""
    app.add_url_rule("/health", "health_index", healths_check, methods=["GET"])
    secure.add_route("/status", status_check, methods=["GET"])
    secure.add_route("/profile", profile_check, methods=["GET"])


def launcher() -> None:
    """Load the health module into the application."""
    init_routes(get_app(), get_secure_router())