"""
Core capability registry functionality.

This package contains the capability enumeration, documentation notes
and the registries providers declare themselves into.
"""

from .capabilities import Capability
from .errors import CapabilityError, RegistryFrozenError, UnrecognizedMetadataError
from .notes import DocumentationNote, DocumentationNotes, supported, unsupported
from .registry import CapabilityRegistry, DocumentationRegistry, ProviderRegistry

__all__ = [
    "Capability",
    "CapabilityError",
    "CapabilityRegistry",
    "DocumentationNote",
    "DocumentationNotes",
    "DocumentationRegistry",
    "ProviderRegistry",
    "RegistryFrozenError",
    "UnrecognizedMetadataError",
    "supported",
    "unsupported",
]
