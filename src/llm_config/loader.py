# src/llm_config/loader.py

import logging
import os
from collections.abc import Mapping

from llm_config.observability import names
from llm_config.observability.base import MetricsHook, NoOpMetricsHook

from .config import LLMConfig
from .errors import (
    ConfigError,
    MissingAPIKeyError,
    MissingProviderError,
    UnsupportedProviderError,
)
from .providers import Provider, get_provider_spec

logger = logging.getLogger(__name__)

PROVIDER_VAR = "LLM_PROVIDER"


def load_llm_config(
    environ: Mapping[str, str] | None = None,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMConfig:
    """Load LLM configuration from environment variables.

    Args:
        environ: Variable source. Defaults to the live process environment,
            read at call time.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A fresh, immutable LLMConfig.

    Raises:
        MissingProviderError: If LLM_PROVIDER is unset or empty.
        UnsupportedProviderError: If LLM_PROVIDER is not a known provider.
        MissingAPIKeyError: If the provider's API key variable is unset or empty.

    Example:
        >>> config = load_llm_config({"LLM_PROVIDER": "GEMINI", "GEMINI_API_KEY": "abc123"})
        >>> config.model
        'gemini-1.5-pro'
    """
    env = os.environ if environ is None else environ

    try:
        config = _resolve(env)
    except ConfigError as e:
        logger.error("Failed to load LLM config: %s", e)
        metrics_hook.increment(
            names.LLM_CONFIG_ERRORS_TOTAL, labels={"reason": e.reason}
        )
        raise

    logger.info(
        "Using LLM provider: %s, model: %s", config.provider.value, config.model
    )
    metrics_hook.increment(
        names.LLM_CONFIG_LOADS_TOTAL,
        labels={"provider": config.provider.value, "model": config.model},
    )
    return config


def _resolve(env: Mapping[str, str]) -> LLMConfig:
    value = env.get(PROVIDER_VAR)
    if not value:
        raise MissingProviderError()

    try:
        provider = Provider(value)
    except ValueError:
        raise UnsupportedProviderError(value) from None

    spec = get_provider_spec(provider)

    api_key = env.get(spec.api_key_var)
    if not api_key:
        raise MissingAPIKeyError(provider, spec.api_key_var)

    # Empty override falls back to the default
    model = env.get(spec.model_var) or spec.default_model

    return LLMConfig(provider=provider, model=model, api_key=api_key)
