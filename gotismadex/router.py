"""HTTP application, documentation pages and token-protected routes."""

from __future__ import annotations

import functools
import html
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from flask import Flask, Response, current_app, redirect, request, send_from_directory

from gotismadex.config import Config, app_config
from gotismadex.logger import get_logger

TOKEN_HEADER = "X-Session-Token"
SECURE_PREFIX = "/auth"

_CDN = "https://cdn.jsdelivr.net/npm"
_SWAGGER_UI_PAGE = (
    '<!DOCTYPE html><html><head><meta charset="utf-8"><title>API documentation</title>'
    f'<link rel="stylesheet" href="{_CDN}/swagger-ui-dist/swagger-ui.css"></head>'
    f'<body><div id="swagger-ui"></div><script src="{_CDN}/swagger-ui-dist/swagger-ui-bundle.js">'
    '</script><script>window.onload = function () {'
    ' window.ui = SwaggerUIBundle({url: "%(spec)s", dom_id: "#swagger-ui"}); };'
    "</script></body></html>"
)
_REDOC_PAGE = (
    '<!DOCTYPE html><html><head><meta charset="utf-8"><title>API documentation</title>'
    '</head><body><redoc spec-url="%(spec)s"></redoc>'
    f'<script src="{_CDN}/redoc/bundles/redoc.standalone.js"></script></body></html>'
)


@dataclass
class AuthenticationMiddleware:
    """Maps session tokens to user names."""

    token_users: dict[str, str] = field(default_factory=dict)

    def populate(self, users: Iterable[str], tokens: Iterable[str]) -> None:
        """Register each user under the token held by the matching environment variable."""
        users, tokens = list(users), list(tokens)
        if len(tokens) < len(users):
            raise ValueError("every API user needs a token variable")
        for user, token_var in zip(users, tokens):
            self.token_users[os.environ.get(token_var, "")] = user

    def authenticate(self, token: str) -> str | None:
        """Return the user owning the token, or None when it is unknown."""
        user = self.token_users.get(token)
        get_logger().info("auth", "auth failed" if user is None else "user is connected : " + user)
        return user


class SecureRouter:
    """Registers routes under a prefix, each guarded by token authentication."""

    def __init__(
        self, app: Flask, middleware: AuthenticationMiddleware, prefix: str = SECURE_PREFIX
    ) -> None:
        self.app = app
        self.middleware = middleware
        self.prefix = prefix

    def add_route(
        self,
        path: str,
        view: Callable[..., Any],
        methods: Iterable[str] = ("GET",),
        endpoint: str | None = None,
    ) -> None:
        @functools.wraps(view)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            if self.middleware.authenticate(request.headers.get(TOKEN_HEADER, "")) is None:
                response = Response("Forbidden\n", status=403, mimetype="text/plain")
                response.headers["X-Content-Type-Options"] = "nosniff"
                return response
            return view(*args, **kwargs)

        self.app.add_url_rule(
            self.prefix + path,
            endpoint or f"secure_{view.__name__}",
            guarded,
            methods=list(methods),
        )

    def route(self, path: str, methods: Iterable[str] = ("GET",)) -> Callable:
        def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(path, view, methods)
            return view

        return decorator


_app: Flask | None = None
_secure: SecureRouter | None = None


def _redirect_trailing_slash() -> Any:
    """Redirect /path/ to /path when only the latter is routed."""
    path = request.path
    if request.url_rule is not None or len(path) <= 1 or not path.endswith("/"):
        return None
    stripped = path.rstrip("/") or "/"
    if not current_app.url_map.bind_to_environ(request.environ).test(stripped, request.method):
        return None
    query = request.query_string.decode("latin-1")
    return redirect(stripped + ("?" + query if query else ""), code=301)


def initialize_router(
    config: Config | None = None, swagger_path: str = "/conf/swagger.yaml"
) -> Flask:
    """Build the application with documentation pages and the secure sub-router."""
    global _app, _secure
    config = config if config is not None else app_config()
    app = Flask("gotismadex")
    app.before_request(_redirect_trailing_slash)
    spec = html.escape(swagger_path, quote=True)

    app.add_url_rule(
        swagger_path,
        "swagger_file",
        lambda: send_from_directory(os.getcwd(), swagger_path.lstrip("/")),
    )
    app.add_url_rule(
        "/swagger",
        "swagger_ui",
        lambda: Response(_SWAGGER_UI_PAGE % {"spec": spec}, mimetype="text/html"),
    )
    app.add_url_rule(
        "/docs", "redoc", lambda: Response(_REDOC_PAGE % {"spec": spec}, mimetype="text/html")
    )

    middleware = AuthenticationMiddleware()
    middleware.populate(config.usersapi, config.tokensapi)

    _app = app
    _secure = SecureRouter(app, middleware)
    return app


def get_app() -> Flask:
    """Return the application built by initialize_router."""
    if _app is None:
        raise RuntimeError("router is not initialised")
    return _app


def get_secure_router() -> SecureRouter:
    """Return the token-protected router built by initialize_router."""
    if _secure is None:
        raise RuntimeError("router is not initialised")
    return _secure