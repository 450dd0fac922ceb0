"""
Errors raised by the capability registry.
"""


class CapabilityError(Exception):
    """Base class for capability registry errors."""


class UnrecognizedMetadataError(CapabilityError):
    """
    A provider declared metadata of a kind the registry does not know.

    This is a defect in the provider's registration code, not a runtime
    condition callers are expected to recover from.
    """

    def __init__(self, provider_id: str, item):
        self.provider_id = provider_id
        self.item = item
        self.type_name = type(item).__name__
        super().__init__(
            f"Unrecognized provider metadata type for '{provider_id}': {self.type_name}"
        )


class RegistryFrozenError(CapabilityError):
    """Registration was attempted after the registry was frozen."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(
            f"Cannot register provider '{provider_id}': registry is frozen"
        )
