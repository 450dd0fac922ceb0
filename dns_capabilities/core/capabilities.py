"""
Capabilities - Optional features a DNS provider may support

Values are stable: new capabilities are appended with new values and
existing values never change.
"""

from enum import Enum


class Capability(Enum):
    """Named optional feature of a DNS provider."""

    # Provider supports ALIAS records (or flattened CNAMEs) and translates
    # them to whatever record type it needs.
    CAN_USE_ALIAS = 0
    CAN_USE_PTR = 1
    CAN_USE_SRV = 2
    CAN_USE_CAA = 3
    # NO_PURGE is broken for this provider; making it work would need
    # emulation of incremental updates.
    CANT_USE_NOPURGE = 4

    # Documentation-only capabilities
    DOC_OFFICIALLY_SUPPORTED = 5
    # Provider allows full management of apex NS records
    DOC_DUAL_HOST = 6
    DOC_CREATE_DOMAINS = 7

    @classmethod
    def from_name(cls, name: str) -> "Capability":
        """
        Look up a capability by name.

        Matching is case-insensitive and accepts '-' in place of '_',
        so "can-use-ptr" and "CAN_USE_PTR" are the same capability.

        Raises:
            ValueError: if no capability has that name
        """
        if not isinstance(name, str):
            raise ValueError(f"Capability name must be a string, got {type(name).__name__}")

        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown capability: '{name}'") from None

    @property
    def label(self) -> str:
        """Lower-case name used in configuration files and CLI output."""
        return self.name.lower()
