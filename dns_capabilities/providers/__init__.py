"""
DNS provider capability declarations.

This package contains the capability and documentation metadata for the
built-in providers, and the startup routine that registers them.
"""

from .builtin import BUILTIN_PROVIDERS, register_builtin_providers

__all__ = ["BUILTIN_PROVIDERS", "register_builtin_providers"]
