"""Configuration module"""
from .settings import SalesConfig, LoggingConfig

__all__ = ['SalesConfig', 'LoggingConfig']
