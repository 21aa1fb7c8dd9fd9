# src/llm_config/errors.py

"""Errors raised while loading LLM configuration.

All of them are terminal: the loader never retries or falls back to a default
provider. Messages name the environment variable the user has to set.
"""

from .providers import Provider, supported_providers


class ConfigError(ValueError):
    """Base class for configuration loading failures."""

    reason = "config_error"


class MissingProviderError(ConfigError):
    reason = "missing_provider"

    def __init__(self) -> None:
        names = supported_providers()
        super().__init__(
            "LLM_PROVIDER environment variable is not set. "
            f"Set it to {', '.join(names[:-1])}, or {names[-1]}"
        )


class UnsupportedProviderError(ConfigError):
    reason = "unsupported_provider"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unsupported LLM provider: {value}. "
            f"Must be one of: {', '.join(supported_providers())}"
        )


class MissingAPIKeyError(ConfigError):
    reason = "missing_api_key"

    def __init__(self, provider: Provider, variable: str) -> None:
        self.provider = provider
        self.variable = variable
        super().__init__(
            f"{variable} environment variable is not set. "
            f"This is required for the {provider.value} provider."
        )
