"""
Configuration management for the Daraja client.
"""

from dataclasses import dataclass, field
from typing import Union

from .constants import BASE_URLS, DEFAULT_ENVIRONMENT, Environment
from .exceptions import ConfigurationError


def parse_environment(value: Union[Environment, str]) -> Environment:
    """Coerce a setting value such as "Sandbox" into an Environment."""
    try:
        return Environment(value.lower())
    except (AttributeError, ValueError):
        raise ConfigurationError(
            f"Unknown Daraja environment: {value}. "
            f"Supported environments: {', '.join(e.value for e in Environment)}"
        )


def base_url_for(environment: Union[Environment, str]) -> str:
    """
    Get the Daraja API base URL for an environment.

    Args:
        environment: Environment member or its value ("sandbox"/"production")

    Returns:
        Base URL without a trailing slash

    Raises:
        ConfigurationError: If the environment is unknown
    """
    return BASE_URLS[parse_environment(environment)]


@dataclass(frozen=True)
class DarajaConfig:
    """
    Immutable Daraja client configuration.

    Credentials are supplied once and never change for the life of a client.
    Secrets are left out of the repr so the config can be logged safely.
    """

    consumer_key: str = field(repr=False)
    consumer_secret: str = field(repr=False)
    shortcode: str = ""
    passkey: str = field(default="", repr=False)
    account_type: str = ""
    environment: Environment = DEFAULT_ENVIRONMENT
    base_url: str = field(init=False)

    def __post_init__(self):
        if not self.consumer_key:
            raise ConfigurationError("consumer_key is required.")
        if not self.consumer_secret:
            raise ConfigurationError("consumer_secret is required.")

        # Frozen dataclass: derived fields go through object.__setattr__
        environment = parse_environment(self.environment)
        object.__setattr__(self, 'environment', environment)
        object.__setattr__(self, 'base_url', base_url_for(environment))

    @property
    def is_sandbox(self) -> bool:
        return self.environment == Environment.SANDBOX

    def get_full_url(self, endpoint: str) -> str:
        """
        Get full URL for an API endpoint.

        Args:
            endpoint: API endpoint path

        Returns:
            Full URL combining base URL and endpoint
        """
        base = self.base_url.rstrip('/')
        endpoint = endpoint.lstrip('/')
        return f"{base}/{endpoint}"

    @classmethod
    def from_settings(cls) -> "DarajaConfig":
        """
        Load configuration from Django settings.

        Reads DARAJA_CONSUMER_KEY, DARAJA_CONSUMER_SECRET, DARAJA_SHORTCODE,
        DARAJA_PASSKEY, DARAJA_ACCOUNT_TYPE and DARAJA_ENVIRONMENT.

        Raises:
            ConfigurationError: If credentials are missing or the
                environment is unknown
        """
        from django.conf import settings

        consumer_key = getattr(settings, 'DARAJA_CONSUMER_KEY', '')
        if not consumer_key:
            raise ConfigurationError(
                "DARAJA_CONSUMER_KEY is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )

        consumer_secret = getattr(settings, 'DARAJA_CONSUMER_SECRET', '')
        if not consumer_secret:
            raise ConfigurationError(
                "DARAJA_CONSUMER_SECRET is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )

        return cls(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            shortcode=str(getattr(settings, 'DARAJA_SHORTCODE', '')),
            passkey=getattr(settings, 'DARAJA_PASSKEY', ''),
            account_type=getattr(settings, 'DARAJA_ACCOUNT_TYPE', ''),
            environment=getattr(settings, 'DARAJA_ENVIRONMENT', DEFAULT_ENVIRONMENT.value),
        )
