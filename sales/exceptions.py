"""
Sales system exception classes
"""
from typing import Optional


class SalesError(Exception):
    """Base exception for the sales system"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: error message
            error_code: error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(SalesError):
    """Invalid configuration value"""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: configuration key
            reason: why the value was rejected
        """
        message = f"Configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason
