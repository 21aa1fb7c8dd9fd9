# src/llm_config/__init__.py

"""Environment-driven LLM provider configuration.

Example:
    >>> from llm_config import load_env_file, load_llm_config
    >>>
    >>> load_env_file()
    >>> config = load_llm_config()
    >>> config.provider, config.model
"""

# Config
from .config import LLMConfig

# Environment
from .env import load_env_file, read_env

# Errors
from .errors import (
    ConfigError,
    MissingAPIKeyError,
    MissingProviderError,
    UnsupportedProviderError,
)

# Loader
from .loader import load_llm_config

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Providers
from .providers import (
    PROVIDERS,
    Provider,
    ProviderSpec,
    get_provider_spec,
    supported_providers,
)

__all__ = [
    # Config
    "LLMConfig",
    # Environment
    "load_env_file",
    "read_env",
    # Errors
    "ConfigError",
    "MissingAPIKeyError",
    "MissingProviderError",
    "UnsupportedProviderError",
    # Loader
    "load_llm_config",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Providers
    "PROVIDERS",
    "Provider",
    "ProviderSpec",
    "get_provider_spec",
    "supported_providers",
]
