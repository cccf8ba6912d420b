# Copyright (c) 2025 PeeperFrog Press
# Licensed under the Apache License, Version 2.0. See LICENSE file for details.
"""
Provider registry. Add new providers to PROVIDER_FACTORIES to make them
available to the MCP server.
"""

from debug_logging import debug_log
from gemini_provider import GeminiProvider

PROVIDER_FACTORIES = {
    "gemini": GeminiProvider,
}

DEFAULT_PROVIDER = "gemini"


def get_available_providers():
    return list(PROVIDER_FACTORIES.keys())


def create_provider(name, config=None):
    """Create a provider instance by name."""
    factory = PROVIDER_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown provider: {name}. Available: {', '.join(get_available_providers())}")
    return factory(config)


def get_configured_providers(config=None):
    """Names of providers that have credentials and are ready to use."""
    configured = []
    for name in get_available_providers():
        try:
            if create_provider(name, config).is_configured():
                configured.append(name)
        except Exception as e:
            debug_log(f"Provider {name} unavailable: {e}", "WARNING")
    return configured
