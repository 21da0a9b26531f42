"""
HeyGen MCP Configuration — server identity, endpoints, credential

Load order: env vars > ~/.heygen-mcp/config.env > defaults
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Required configuration is missing or malformed."""


def _default_data_dir() -> Path:
    return Path(os.environ.get("HEYGEN_MCP_DATA_DIR", str(Path.home() / ".heygen-mcp")))


def _load_config_env():
    """Load key=value pairs from <data dir>/config.env if it exists."""
    config_file = _default_data_dir() / "config.env"
    if not config_file.exists():
        return
    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


# Load config.env before reading env vars
_load_config_env()


class Config:
    # Server identity
    SERVER_NAME = "heygen-mcp-server"
    SERVER_VERSION = "1.0.0"
    PROTOCOL_VERSION = "2024-11-05"

    # Credential env var (read at server start, not at import)
    API_KEY_ENV = "HEYGEN_API_KEY"
    API_KEY_HEADER = "X-Api-Key"

    # HeyGen endpoints
    API_BASE_URL = os.environ.get("HEYGEN_API_BASE_URL", "https://api.heygen.com/v1")
    UPLOAD_BASE_URL = os.environ.get("HEYGEN_UPLOAD_BASE_URL", "https://upload.heygen.com/v1")

    # Paths
    DATA_DIR = _default_data_dir()
    LOG_DIR = DATA_DIR / "logs"

    # Logging (NEVER to stdout — would corrupt MCP protocol)
    LOG_LEVEL = os.environ.get("HEYGEN_MCP_LOG_LEVEL", "INFO")
    LOG_FILE = LOG_DIR / "heygen-mcp.log"
    ERROR_LOG = LOG_DIR / "heygen-mcp-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of everything the HTTP client needs."""

    api_key: str
    api_base_url: str = Config.API_BASE_URL
    upload_base_url: str = Config.UPLOAD_BASE_URL
    timeout: Optional[float] = None


def load_settings() -> Settings:
    """
    Read the credential and endpoints from the environment.
    Raises ConfigError when HEYGEN_API_KEY is missing or empty.
    """
    api_key = os.environ.get(Config.API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{Config.API_KEY_ENV} environment variable is required")

    raw_timeout = os.environ.get("HEYGEN_HTTP_TIMEOUT", "").strip()
    timeout = None
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"HEYGEN_HTTP_TIMEOUT must be a number, got {raw_timeout!r}")

    return Settings(
        api_key=api_key,
        api_base_url=Config.API_BASE_URL.rstrip("/"),
        upload_base_url=Config.UPLOAD_BASE_URL.rstrip("/"),
        timeout=timeout,
    )
