"""
Configuration - YAML configuration, logging setup and config-declared providers

Besides the built-in providers, a configuration file may declare extra
providers with their capabilities and documentation notes:

    providers:
      MYDNS:
        capabilities: [can_use_ptr, can_use_srv]
        notes:
          doc_dual_host: {has_feature: false, comment: "No apex NS", link: ""}
"""

import logging
import sys
from typing import Dict, List

import yaml

from ..core.notes import DocumentationNote, DocumentationNotes
from ..core.registry import ProviderRegistry
from ..providers.builtin import register_builtin_providers
from .validators import parse_capability, validate_provider_id

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)

    if not config:
        return get_default_config()

    if not isinstance(config, dict):
        logger.error(f"Config file {config_path} must contain a mapping")
        sys.exit(1)

    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "include_builtin": True,
        "providers": {},
        "registration": {"on_error": "exit"},
        "logging": {"level": "INFO", "file": None},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else str(logging_config.get("level", "INFO")).upper()
    log_file = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_registry(config: Dict) -> ProviderRegistry:
    """Create a registry, register built-in and configured providers, and freeze it."""
    on_error = (config.get("registration") or {}).get("on_error", "exit")
    registry = ProviderRegistry(on_error=on_error)

    if config.get("include_builtin", True):
        register_builtin_providers(registry)

    register_configured_providers(registry, config)
    registry.freeze()
    return registry


def register_configured_providers(registry: ProviderRegistry, config: Dict) -> int:
    """
    Register providers declared under the 'providers' config key.

    Args:
        registry: Registry to register into
        config: Loaded configuration

    Returns:
        Number of providers registered

    Raises:
        ValueError: if a provider id, capability name or note is invalid
    """
    providers = config.get("providers") or {}
    if not isinstance(providers, dict):
        raise ValueError("Configuration key 'providers' must be a mapping of provider id to declaration")

    registered = 0

    for provider_id, declaration in providers.items():
        items = parse_provider_declaration(provider_id, declaration or {})
        if registry.register_metadata(provider_id, items):
            registered += 1

    if registered:
        logger.info(f"Registered {registered} providers from configuration")
    return registered


def parse_provider_declaration(provider_id: str, declaration: Dict) -> List:
    """Convert one provider's config entry into registry metadata items."""
    if not validate_provider_id(provider_id):
        raise ValueError(f"Invalid provider id in configuration: '{provider_id}'")

    if not isinstance(declaration, dict):
        raise ValueError(f"Provider '{provider_id}': declaration must be a mapping")

    capabilities = declaration.get("capabilities") or []
    if not isinstance(capabilities, list):
        raise ValueError(f"Provider '{provider_id}': 'capabilities' must be a list")

    notes_config = declaration.get("notes") or {}
    if not isinstance(notes_config, dict):
        raise ValueError(f"Provider '{provider_id}': 'notes' must be a mapping")

    items = []
    for name in capabilities:
        try:
            items.append(parse_capability(name))
        except ValueError as e:
            raise ValueError(f"Provider '{provider_id}': {e}") from None

    notes = DocumentationNotes()
    for name, value in notes_config.items():
        try:
            notes[parse_capability(name)] = parse_note(value)
        except ValueError as e:
            raise ValueError(f"Provider '{provider_id}': {e}") from None

    if notes:
        items.append(notes)

    return items


def parse_note(value) -> DocumentationNote:
    """
    Parse a documentation note from configuration.

    A note is either a bare boolean or a mapping with 'has_feature' and
    optional 'comment' and 'link' keys.
    """
    if isinstance(value, bool):
        return DocumentationNote(has_feature=value)

    if not isinstance(value, dict) or not isinstance(value.get("has_feature"), bool):
        raise ValueError(f"Invalid documentation note: {value!r}")

    return DocumentationNote(
        has_feature=value["has_feature"],
        comment=str(value.get("comment") or ""),
        link=str(value.get("link") or ""),
    )
