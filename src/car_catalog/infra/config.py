from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_DATA_DIR = "data"
DEFAULT_FILE_PREFIX = "Car"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """Load a `.env` file found from the working directory upwards.

    Variables already set in the environment win over the file.
    """
    load_dotenv(find_dotenv(usecwd=True))


def catalog_data_dir() -> Path:
    return Path(os.getenv("CATALOG_DATA_DIR") or DEFAULT_DATA_DIR)


def catalog_file_prefix() -> str:
    return os.getenv("CATALOG_FILE_PREFIX") or DEFAULT_FILE_PREFIX


def server_host() -> str:
    return os.getenv("HOST") or DEFAULT_HOST


def server_port() -> int:
    raw = os.getenv("PORT")

    if not raw:
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}") from None

    if not 0 < port < 65536:
        raise RuntimeError(f"PORT must be between 1 and 65535, got {port}")

    return port


def log_level() -> str:
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS") or "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
