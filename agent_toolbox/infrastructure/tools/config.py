"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading settings and API keys from .env file
2. Setting default configurations for the bundled tools
3. Validating settings (lax; nothing is required for the simulated tools)
"""

import os
from typing import Any, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_TRUTHY = ('1', 'true', 'yes', 'on')

class Config:
    """Configuration manager for tool settings and API keys."""

    # File system tool
    FILE_SYSTEM_ROOT: str = os.getenv('FILE_SYSTEM_ROOT', '')  # empty means no sandbox
    FILE_SYSTEM_ENCODING: str = os.getenv('FILE_SYSTEM_ENCODING', 'utf-8')

    # Payment gateway tool (simulated; the key is only held for a real backend)
    PAYMENT_GATEWAY_API_KEY: str = os.getenv('PAYMENT_GATEWAY_API_KEY', '')
    PAYMENT_CURRENCY: str = os.getenv('PAYMENT_CURRENCY', 'USD')

    # CLI
    LOG_LEVEL: str = os.getenv('AGENT_TOOLBOX_LOG_LEVEL', 'WARNING')

    # Validation flags
    REQUIRE_PAYMENT_API_KEY: bool = os.getenv('REQUIRE_PAYMENT_API_KEY', 'false').lower() in _TRUTHY

    @classmethod
    def validate_settings(cls) -> None:
        """
        Validate settings that would make tool construction fail later.

        Raises:
            ValueError: If a payment key is required but missing, or the
                configured file system root is not a directory
        """
        if cls.REQUIRE_PAYMENT_API_KEY and not cls.PAYMENT_GATEWAY_API_KEY:
            raise ValueError(
                "Missing required API key: PAYMENT_GATEWAY_API_KEY. "
                "Unset REQUIRE_PAYMENT_API_KEY to run the simulated gateway without one."
            )
        if cls.FILE_SYSTEM_ROOT and not os.path.isdir(cls.FILE_SYSTEM_ROOT):
            raise ValueError(f"FILE_SYSTEM_ROOT is not a directory: {cls.FILE_SYSTEM_ROOT}")

    @classmethod
    def get(cls, key_name: str, default: Optional[Any] = None) -> Any:
        """
        Get a setting by name.

        Args:
            key_name: Name of the setting to retrieve
            default: Value returned when the setting is unknown

        Returns:
            The setting value or ``default``
        """
        return getattr(cls, key_name, default)
