"""Service configuration loaded from environment variables"""
import os
from dataclasses import dataclass

from src.core.enums import Environment
from src.core.exceptions import ConfigurationError


DEFAULT_STORAGE_IMAGE_PATH = "./storage/images"
DEFAULT_MAX_UPLOAD_SIZE = 10 << 20


@dataclass(frozen=True)
class ServerConfig:
    """Runtime configuration for the image editor service"""
    env: Environment = Environment.LOCAL
    storage_image_path: str = DEFAULT_STORAGE_IMAGE_PATH
    host: str = "0.0.0.0"
    port: int = 8082
    max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE
    output_prefix: str = "proc"
    upload_prefix: str = "img"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Build configuration from environment variables.

        Returns:
            ServerConfig populated from EDITOR_ENV, STORAGE_IMAGE_PATH, HOST,
            PORT, MAX_UPLOAD_SIZE, OUTPUT_PREFIX and UPLOAD_PREFIX

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env_str = os.getenv("EDITOR_ENV", Environment.LOCAL.value)
        try:
            env = Environment(env_str)
        except ValueError:
            valid_envs = [e.value for e in Environment]
            raise ConfigurationError(
                f"Invalid EDITOR_ENV '{env_str}'. Valid environments: {', '.join(valid_envs)}"
            )

        return cls(
            env=env,
            storage_image_path=os.getenv("STORAGE_IMAGE_PATH", DEFAULT_STORAGE_IMAGE_PATH),
            host=os.getenv("HOST", "0.0.0.0"),
            port=cls._int_from_env("PORT", 8082),
            max_upload_size=cls._int_from_env("MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
            output_prefix=os.getenv("OUTPUT_PREFIX", "proc"),
            upload_prefix=os.getenv("UPLOAD_PREFIX", "img"),
        )

    @staticmethod
    def _int_from_env(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got '{raw}'")
