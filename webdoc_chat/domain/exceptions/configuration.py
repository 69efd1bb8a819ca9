"""Configuration-related exceptions for WebDoc Chat."""

from .base import WebDocChatError


class ConfigurationError(WebDocChatError):
    """Configuration or environment variable errors."""

    error_code = "WDC_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "WDC_CFG_002"
