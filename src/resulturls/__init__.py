"""
resulturls - URL generation for test run result pages and artifacts
"""

__version__ = "0.1.0"

from .core import FriendlyUrlStyle, StandardUrlStyle, UrlGenerator, create
from .errors import ConfigError, InvalidTestId, UrlGeneratorError
from .models import RunContext

__all__ = [
    "ConfigError",
    "FriendlyUrlStyle",
    "InvalidTestId",
    "RunContext",
    "StandardUrlStyle",
    "UrlGenerator",
    "UrlGeneratorError",
    "create",
]
