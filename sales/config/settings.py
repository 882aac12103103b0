"""
Sales order settings
Environment variables take precedence, with validation
"""
import os
from typing import Optional
from dotenv import load_dotenv
from sales.exceptions import ConfigurationError

load_dotenv()


def get_env_int(key: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Read an integer from the environment (with validation)"""
    value = os.getenv(key)
    if value is None:
        return default

    try:
        int_value = int(value)
    except ValueError:
        raise ConfigurationError(key, f"cannot convert to integer: {value}")
    if min_value is not None and int_value < min_value:
        raise ConfigurationError(key, f"value is below the minimum ({min_value}): {int_value}")
    if max_value is not None and int_value > max_value:
        raise ConfigurationError(key, f"value is above the maximum ({max_value}): {int_value}")
    return int_value


def get_env_str(key: str, default: str) -> str:
    """Read a string from the environment"""
    return os.getenv(key, default)


class SalesConfig:
    """Order item limits"""
    MIN_UNITS_PER_ITEM = get_env_int("SALES_MIN_UNITS_PER_ITEM", 1, min_value=1)
    MAX_UNITS_PER_ITEM = get_env_int("SALES_MAX_UNITS_PER_ITEM", 15, min_value=1)

    @classmethod
    def validate(cls):
        """Check that the limits are consistent"""
        if cls.MIN_UNITS_PER_ITEM < 1:
            raise ConfigurationError("MIN_UNITS_PER_ITEM", "minimum units must be at least 1")
        if cls.MAX_UNITS_PER_ITEM < cls.MIN_UNITS_PER_ITEM:
            raise ConfigurationError(
                "MAX_UNITS_PER_ITEM",
                f"maximum units ({cls.MAX_UNITS_PER_ITEM}) is below the minimum ({cls.MIN_UNITS_PER_ITEM})",
            )


class LoggingConfig:
    """Logging settings"""
    LEVEL = get_env_str("SALES_LOG_LEVEL", "INFO").upper()
    FORMAT = get_env_str("SALES_LOG_FORMAT", '%(asctime)s - %(name)s - %(levelname)s - %(message)s')


SalesConfig.validate()
