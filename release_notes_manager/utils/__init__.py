"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    HEADER_TEMPLATE,
    SECTION_HEADER_TEMPLATE,
    SECTION_ITEM_TEMPLATE,
    VERSION_PATTERN,
)
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "HEADER_TEMPLATE",
    "SECTION_HEADER_TEMPLATE",
    "SECTION_ITEM_TEMPLATE",
    "VERSION_PATTERN",
    "retry_on_rate_limit",
]
