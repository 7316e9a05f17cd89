"""HTTP API skeleton with YAML configuration, MySQL access, token authentication and health endpoints."""

__version__ = "0.1.0"