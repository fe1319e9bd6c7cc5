"""Configuration management for Vehicle Swap.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the VEHICLESWAP_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (VEHICLESWAP_* prefix)
2. .env file in the project root
3. Default values defined in VehicleSwapConfig

Example .env file:
    VEHICLESWAP_API_KEY=your-gemini-key
    VEHICLESWAP_MODEL_NAME=gemini-2.5-flash-image
    VEHICLESWAP_SERVER_PORT=7860

The API key is also picked up from ``GEMINI_API_KEY`` or plain ``API_KEY``.

Missing Credentials
-------------------
Loading the configuration never fails because the API key is absent. The key is
only demanded when the Gemini client is built (see
:func:`vehicleswap.core.edit_client.create_edit_client`), which raises
:class:`ConfigurationError`. The application entry point treats that as a fatal
startup error.

Usage Example
-------------
    from vehicleswap.core.config import config

    print(config.model_name)
    key = config.require_api_key()
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when the application cannot start with the current configuration."""

    pass


class VehicleSwapConfig(BaseSettings):
    """Main configuration for Vehicle Swap.

    Attributes
    ----------
    Gemini Settings:
        api_key : SecretStr | None
            Gemini API key (required to run, optional to construct)
        model_name : str
            Gemini image model used for editing

    UI Settings:
        server_name : str
            Server bind address (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        share : bool
            Create public gradio.live link (keep False for local-only)

    Logging:
        log_level : str
            Root log level for the application

    Examples
    --------
        >>> custom_config = VehicleSwapConfig(api_key="test-key", server_port=8080)
        >>> custom_config.require_api_key()
        'test-key'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VEHICLESWAP_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Gemini settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "VEHICLESWAP_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Gemini API key",
    )
    model_name: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image editing",
    )

    # UI settings
    server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    def require_api_key(self) -> str:
        """Return the API key, or raise if it is missing.

        Returns:
            The plain API key string

        Raises:
            ConfigurationError: If no key is configured or it is blank
        """
        if self.api_key is None or not self.api_key.get_secret_value().strip():
            raise ConfigurationError(
                "API key is not set. Export VEHICLESWAP_API_KEY (or GEMINI_API_KEY) "
                "or add it to .env"
            )
        return self.api_key.get_secret_value()


# Global configuration instance
config = VehicleSwapConfig()
