"""Environment-driven settings and logging setup for the actions service."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, field_validator

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ENV_FIELDS = {
    "TENSOR_API_URL": "tensor_api_url",
    "TENSOR_API_KEY": "tensor_api_key",
    "SOLANA_RPC_URL": "solana_rpc_url",
    "NFT_ACTIONS_HTTP_TIMEOUT": "http_timeout_s",
    "NFT_ACTIONS_LOG_LEVEL": "log_level",
    "NFT_ACTIONS_CORS_ORIGINS": "cors_allow_origins",
}


class Settings(BaseModel):
    """Process-wide settings, read once at startup."""

    model_config = {"frozen": True}

    tensor_api_url: str = "https://api.mainnet.tensordev.io"
    tensor_api_key: Optional[str] = None
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"
    http_timeout_s: float = 10.0
    log_level: str = "INFO"
    cors_allow_origins: Tuple[str, ...] = ("*",)

    @field_validator("tensor_api_url", "solana_rpc_url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return value.rstrip("/")

    @field_validator("http_timeout_s")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Timeout must be positive.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return tuple(origin.strip() for origin in value.split(",") if origin.strip())
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {
            field: environ[name]
            for name, field in _ENV_FIELDS.items()
            if environ.get(name)
        }
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
