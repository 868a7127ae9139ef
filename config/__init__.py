"""
Config package exports: fixed parser tables and environment settings.
"""

from . import constant
from . import settings
from .constant import *
from .settings import *

__all__ = []
__all__ += constant.__all__
__all__ += settings.__all__
