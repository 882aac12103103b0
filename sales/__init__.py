"""
Sales order domain
"""
from . import config
from . import domain
from . import exceptions
from . import utils

__all__ = [
    'config',
    'domain',
    'exceptions',
    'utils',
]
