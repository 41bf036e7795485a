"""Environment configuration for Lambda functions."""
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

ENVIRONMENTS = ("dev", "test", "prod")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    environment: str
    allowed_origin: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If ENVIRONMENT is unknown, or ALLOWED_ORIGIN
                is missing in production
        """
        environment = os.environ.get("ENVIRONMENT", "dev")
        if environment not in ENVIRONMENTS:
            raise ConfigurationError(
                f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{environment}'",
                config_key="ENVIRONMENT",
            )

        allowed_origin = os.environ.get("ALLOWED_ORIGIN")
        if not allowed_origin:
            if environment == "prod":
                raise ConfigurationError(
                    "ALLOWED_ORIGIN environment variable is required in prod",
                    config_key="ALLOWED_ORIGIN",
                )
            allowed_origin = "*"

        return cls(
            environment=environment,
            allowed_origin=allowed_origin,
        )


def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config instance (cached after first call)
    """
    if not hasattr(get_config, "_config"):
        get_config._config = Config.from_env()
    return get_config._config
