"""Configuration for the product service.

Reads the listening port from the ``PORT`` environment variable, optionally
seeded from a local ``.env`` file. Fails fast on a bad value so the server
never starts on an unintended port.
"""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3030
MAX_PORT = 65535

_PORT_RE = re.compile(r"\+?[0-9]+")


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """Resolved server settings."""
    host: str
    port: int


def parse_port(raw: str) -> int:
    """Parse ``raw`` as an unsigned 16-bit port number."""
    if not _PORT_RE.fullmatch(raw):
        raise ConfigurationError(f"PORT must be a valid number, got {raw!r}")

    port = int(raw)
    if port > MAX_PORT:
        raise ConfigurationError(
            f"PORT must be between 0 and {MAX_PORT}, got {raw!r}"
        )
    return port


def load_settings(
    environ: Optional[Mapping[str, str]] = None, dotenv: bool = True
) -> Settings:
    """
    Load server settings once at startup.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
        dotenv: Load a local .env file into os.environ first (local
            development only). Ignored when environ is given.

    Raises:
        ConfigurationError: If PORT is set but is not a valid port.
    """
    if environ is None and dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    if environ is None:
        environ = os.environ

    raw_port = environ.get("PORT")
    port = DEFAULT_PORT if raw_port is None else parse_port(raw_port)

    return Settings(host=DEFAULT_HOST, port=port)
