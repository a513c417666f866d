"""Installer constants. Network and binary locations can be overridden from the environment."""

from __future__ import annotations

import os

RAW_BASE_URL = os.environ.get(
    "SUPALLM_RAW_BASE_URL", "https://raw.githubusercontent.com/supallm/supallm/main"
).rstrip("/")
DOWNLOAD_TIMEOUT = float(os.environ.get("SUPALLM_DOWNLOAD_TIMEOUT") or 30)
COMPOSE_BIN = os.environ.get("SUPALLM_COMPOSE_BIN") or "docker"

COMPOSE_FILE = "docker-compose.yml"
ENV_FILE = ".env"

# (remote path, local file name), downloaded in this order
REQUIRED_FILES = [
    ("docker-compose.yml", COMPOSE_FILE),
    (".env.exemple", ENV_FILE),
]

DEFAULT_DASHBOARD_PORT = 3000
DEFAULT_BACKEND_PORT = 3001
INFRA_PORTS = frozenset({5431, 6379})

CONTINUE = "Continue"
CANCEL = "Cancel"
SETUP_CLI = "Continue with CLI (recommended)"
SETUP_CUSTOM = "Do a custom config myself (only if you know what you're doing)"


def remote_url(path: str) -> str:
    return f"{RAW_BASE_URL}/{path.lstrip('/')}"
