"""
Registry - Which provider supports which capability

This module holds the capability and documentation registries, and the
ProviderRegistry facade providers call once at startup to declare their
capabilities and documentation notes.
"""

import logging
import sys
import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional

from .capabilities import Capability
from .errors import RegistryFrozenError, UnrecognizedMetadataError
from .notes import DocumentationNote, DocumentationNotes

logger = logging.getLogger(__name__)

ON_ERROR_POLICIES = ("exit", "raise", "skip")


class CapabilityRegistry:
    """Maps provider id to the set of capabilities it has declared."""

    def __init__(self):
        self._capabilities: Dict[str, Dict[Capability, bool]] = {}

    def declare(self, provider_id: str, capability: Capability):
        """Mark a capability as supported by a provider."""
        self._capabilities.setdefault(provider_id, {})[capability] = True

    def has_capability(self, provider_id: str, capability: Capability) -> bool:
        """Return whether the provider declared the capability."""
        return self._capabilities.get(provider_id, {}).get(capability, False)

    def capabilities_for(self, provider_id: str) -> FrozenSet[Capability]:
        """Return every capability the provider declared."""
        declared = self._capabilities.get(provider_id, {})
        return frozenset(cap for cap, enabled in declared.items() if enabled)

    def providers(self) -> List[str]:
        return sorted(self._capabilities)


class DocumentationRegistry:
    """Maps provider id to its per-capability documentation notes."""

    def __init__(self):
        self._notes: Dict[str, Dict[Capability, DocumentationNote]] = {}

    def declare_notes(self, provider_id: str, notes: Mapping[Capability, DocumentationNote]):
        """Merge notes into the provider's set; incoming notes win."""
        self._notes.setdefault(provider_id, {}).update(notes)

    def notes_for(self, provider_id: str) -> Mapping[Capability, DocumentationNote]:
        """Return a read-only snapshot of the provider's notes."""
        return MappingProxyType(dict(self._notes.get(provider_id, {})))

    def providers(self) -> List[str]:
        return sorted(self._notes)


class ProviderRegistry:
    """
    Capability and documentation registry for all providers.

    Built once by the application's startup routine and passed to whatever
    needs to ask "does provider X support feature Y?". Providers register
    during initialization; after freeze() the registry is read-only.

    Args:
        on_error: What register_metadata does when a provider declares an
            item that is neither a Capability nor DocumentationNotes:
            "exit" logs and terminates the process, "raise" raises
            UnrecognizedMetadataError, "skip" logs a warning and leaves
            the provider unregistered.
    """

    def __init__(self, on_error: str = "exit"):
        _check_policy(on_error)
        self.on_error = on_error
        self.capabilities = CapabilityRegistry()
        self.documentation = DocumentationRegistry()
        self._lock = threading.RLock()
        self._frozen = False

    def register_metadata(
        self,
        provider_id: str,
        items: Iterable,
        on_error: Optional[str] = None,
    ) -> bool:
        """
        Register a provider's capabilities and documentation notes.

        Every item is checked before any is applied, so a call containing
        an unrecognized item registers nothing.

        Args:
            provider_id: Provider type name, e.g. "BIND"
            items: Capability values and DocumentationNotes, in any mix
            on_error: Override the registry's error policy for this call

        Returns:
            True if the provider was registered, False if it was skipped
        """
        policy = on_error or self.on_error
        _check_policy(policy)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(provider_id)

            # A lone Capability or note set is not a sequence of items
            if isinstance(items, (Capability, Mapping)):
                return self._reject(provider_id, items, policy)
            items = list(items)

            for item in items:
                if not _is_metadata(item):
                    return self._reject(provider_id, item, policy)

            for item in items:
                if isinstance(item, Capability):
                    self.capabilities.declare(provider_id, item)
                    logger.debug(f"{provider_id}: declared {item.name}")
                else:
                    self.documentation.declare_notes(provider_id, item)
                    logger.debug(f"{provider_id}: declared {len(item)} documentation notes")

        logger.info(f"Registered provider {provider_id} ({len(items)} metadata items)")
        return True

    def _reject(self, provider_id: str, item, policy: str) -> bool:
        error = UnrecognizedMetadataError(provider_id, item)

        if policy == "skip":
            logger.warning(f"{error} - skipping provider")
            return False

        if policy == "raise":
            raise error

        logger.critical(str(error))
        sys.exit(1)

    def has_capability(self, provider_id: str, capability: Capability) -> bool:
        """Return whether the provider declared the capability (False if unknown)."""
        with self._lock:
            return self.capabilities.has_capability(provider_id, capability)

    def notes_for(self, provider_id: str) -> Mapping[Capability, DocumentationNote]:
        """Return a read-only snapshot of the provider's documentation notes."""
        with self._lock:
            return self.documentation.notes_for(provider_id)

    def capabilities_for(self, provider_id: str) -> FrozenSet[Capability]:
        with self._lock:
            return self.capabilities.capabilities_for(provider_id)

    def providers(self) -> List[str]:
        """Return every provider with declared capabilities or notes."""
        with self._lock:
            return sorted(
                set(self.capabilities.providers()) | set(self.documentation.providers())
            )

    def freeze(self):
        """End the initialization phase; further registration is an error."""
        with self._lock:
            self._frozen = True
        logger.info(f"Provider registry frozen with {len(self.providers())} providers")

    @property
    def frozen(self) -> bool:
        return self._frozen


def _check_policy(policy: str):
    if policy not in ON_ERROR_POLICIES:
        raise ValueError(
            f"Invalid on_error policy '{policy}', expected one of {', '.join(ON_ERROR_POLICIES)}"
        )


def _is_metadata(item) -> bool:
    if isinstance(item, Capability):
        return True

    if isinstance(item, DocumentationNotes):
        return all(
            isinstance(capability, Capability) and isinstance(note, DocumentationNote)
            for capability, note in item.items()
        )

    return False
