"""
Validators - Input validation for provider declarations

This module validates provider ids and capability names coming from
configuration files and the command line.
"""

import logging
import re

from ..core.capabilities import Capability

logger = logging.getLogger(__name__)

PROVIDER_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


def validate_provider_id(provider_id: str) -> bool:
    """
    Validate a provider id.

    Args:
        provider_id: The provider id to validate, e.g. "BIND"

    Returns:
        True if valid, False otherwise
    """
    if not provider_id or not isinstance(provider_id, str):
        return False

    if len(provider_id) > 64:
        logger.warning(f"Provider id too long: {provider_id}")
        return False

    if not PROVIDER_ID_PATTERN.match(provider_id):
        logger.warning(f"Invalid provider id: {provider_id}")
        return False

    return True


def parse_capability(name: str) -> Capability:
    """
    Parse a capability name.

    Args:
        name: Capability name such as "can_use_ptr" or "CAN-USE-PTR"

    Returns:
        The matching Capability

    Raises:
        ValueError: if the name does not match any capability
    """
    try:
        return Capability.from_name(name)
    except ValueError:
        known = ", ".join(cap.label for cap in Capability)
        raise ValueError(f"Unknown capability '{name}' (known: {known})") from None
