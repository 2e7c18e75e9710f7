import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Hosting platforms set PORT; NODE_PORT is honoured for older deploy scripts.
PORT_VARIABLES = ("PORT", "NODE_PORT")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"port out of range: {port}")
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the process environment.

    The first of PORT / NODE_PORT that is set and non-empty wins; otherwise
    the port falls back to 3000.
    """
    env = os.environ if environ is None else environ
    port = DEFAULT_PORT
    for name in PORT_VARIABLES:
        raw = env.get(name, "").strip()
        if raw:
            port = parse_port(raw)
            break
    host = env.get("HOST", "").strip() or DEFAULT_HOST
    return Settings(host=host, port=port)
