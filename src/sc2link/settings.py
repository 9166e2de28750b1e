"""Engine client configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

from sc2link.messaging.encoder import MAX_BUFFER_LEN


class ClientSettings(BaseSettings):
    model_config = {"env_prefix": "SC2_"}

    host: str = Field(default="127.0.0.1", min_length=1)
    port: int = Field(default=5000, ge=1, le=65535)
    connect_timeout: float = Field(default=120.0, gt=0)
    # None keeps reads blocking until the engine answers
    read_timeout: float | None = Field(default=None, gt=0)
    max_payload_bytes: int = Field(default=MAX_BUFFER_LEN, ge=1024)
    log_dir: str | None = Field(default=None, min_length=1)
