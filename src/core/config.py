"""Server settings. Defaults live here; environment variables override them."""

import os
from dataclasses import dataclass
from typing import Self

ENV_PREFIX = "TICTACTOE_"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Self:
        """Read TICTACTOE_HOST / TICTACTOE_PORT / TICTACTOE_LOG_LEVEL, falling back on the defaults."""
        port = os.environ.get(f"{ENV_PREFIX}PORT", str(DEFAULT_PORT))
        if not port.isdigit():
            raise ValueError(f"{ENV_PREFIX}PORT must be a number, got {port!r}")
        return cls(
            host=os.environ.get(f"{ENV_PREFIX}HOST", DEFAULT_HOST),
            port=int(port),
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
