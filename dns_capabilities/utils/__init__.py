"""
Utility functions and helpers.

This package contains validation and configuration helpers.
"""

from .config import (
    build_registry,
    config_logger,
    get_default_config,
    load_config,
    register_configured_providers,
)
from .validators import parse_capability, validate_provider_id

__all__ = [
    "build_registry",
    "config_logger",
    "get_default_config",
    "load_config",
    "parse_capability",
    "register_configured_providers",
    "validate_provider_id",
]
