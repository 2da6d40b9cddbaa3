"""Runtime settings for the HTTP transport, read from the environment."""

import os

from pydantic import BaseModel

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


class Settings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from PORT and SWAGGER_BOLT_* environment variables."""
        return cls(
            host=os.getenv("SWAGGER_BOLT_HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", DEFAULT_PORT)),
            max_body_bytes=int(os.getenv("SWAGGER_BOLT_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)),
            log_level=os.getenv("SWAGGER_BOLT_LOG_LEVEL", "INFO"),
        )
