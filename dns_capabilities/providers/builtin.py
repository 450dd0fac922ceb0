"""
Built-in providers - Capability metadata for the providers shipped with
the DNS records manager.
"""

import logging
from typing import Dict, List

from ..core.capabilities import Capability
from ..core.notes import DocumentationNotes, supported, unsupported
from ..core.registry import ProviderRegistry

logger = logging.getLogger(__name__)

BIND_FEATURES = DocumentationNotes(
    {
        Capability.DOC_DUAL_HOST: supported(),
        Capability.DOC_OFFICIALLY_SUPPORTED: supported(),
        Capability.DOC_CREATE_DOMAINS: supported(
            "Driver just maintains list of zone files. It should automatically add missing ones."
        ),
    }
)

NONE_FEATURES = DocumentationNotes(
    {
        Capability.DOC_OFFICIALLY_SUPPORTED: supported(),
        Capability.DOC_DUAL_HOST: unsupported("Records are never sent anywhere"),
        Capability.DOC_CREATE_DOMAINS: unsupported(),
    }
)

# Provider id -> metadata items, in registration order
BUILTIN_PROVIDERS: Dict[str, List] = {
    "BIND": [
        Capability.CAN_USE_PTR,
        Capability.CAN_USE_SRV,
        Capability.CAN_USE_CAA,
        BIND_FEATURES,
    ],
    "NONE": [
        Capability.CAN_USE_ALIAS,
        Capability.CAN_USE_PTR,
        Capability.CAN_USE_SRV,
        Capability.CAN_USE_CAA,
        NONE_FEATURES,
    ],
}


def register_builtin_providers(registry: ProviderRegistry) -> int:
    """Register all built-in providers and return how many were registered."""
    registered = 0
    for provider_id, items in BUILTIN_PROVIDERS.items():
        if registry.register_metadata(provider_id, items):
            registered += 1

    logger.info(f"Registered {registered} built-in providers")
    return registered
