"""
DNS Provider Capabilities - Capability and documentation registry

Describes, per DNS provider, which optional record types and behaviours
it supports, with human-readable notes explaining the support.
"""

__version__ = "1.0.0"
__author__ = "DNS Records Manager Team"
__description__ = "Capability and documentation registry for DNS providers"

from .core.capabilities import Capability
from .core.notes import DocumentationNote, DocumentationNotes, supported, unsupported
from .core.registry import ProviderRegistry

__all__ = [
    "Capability",
    "DocumentationNote",
    "DocumentationNotes",
    "ProviderRegistry",
    "supported",
    "unsupported",
]
