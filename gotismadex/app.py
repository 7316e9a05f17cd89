"""Command-line entry point that configures and starts the API."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from gotismadex import health
from gotismadex.config import Config, ConfigError, read_config
from gotismadex.database import database_init
from gotismadex.docs import draw_start
from gotismadex.logger import get_logger
from gotismadex.router import initialize_router

_ENDPOINT = "main"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gotismadex")
    parser.add_argument(
        "-conf",
        "--conf",
        dest="conf",
        default=os.path.join(os.getcwd(), "conf/conf_local.yaml"),
        help="path for the configuration file.",
    )
    parser.add_argument(
        "-swagger",
        "--swagger",
        dest="swagger",
        default="/conf/swagger.yaml",
        help="relative path for the swagger file.",
    )
    return parser.parse_args(argv)


def init_conf(conf_path: str | Path) -> Config:
    """Load the configuration file and apply its log level."""
    config = read_config(conf_path)
    get_logger().configure(config.loglevel)
    return config


def launcher_modules() -> None:
    """Load every module into the application; the order can matter."""
    health.launcher()


def specimen_modules() -> None:
    """Populate the database with specimen data."""
    get_logger().info("Specimen", "Specimen data charged up.")


def main(argv: Sequence[str] | None = None) -> int:
    """Configure the API and serve it until the server stops."""
    args = _parse_args(argv)
    log = get_logger()
    draw_start()
    try:
        config = init_conf(args.conf)
    except ConfigError as exc:
        log.critical(_ENDPOINT, "configuration could not be loaded.", exc)
        return 1
    database_init(config)
    app = initialize_router(config, args.swagger)

    launcher_modules()
    log.info(_ENDPOINT, "Conf and modules loaded ; app starting...")

    if config.specimen:
        specimen_modules()

    log.info(_ENDPOINT, "API ready.")

    try:
        port = int(config.portapi) if config.portapi else 0
        app.run(host="0.0.0.0", port=port)
    except (OSError, ValueError) as exc:
        log.critical(_ENDPOINT, "listen error", exc)
        return 1
    return 0