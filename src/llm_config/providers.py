# src/llm_config/providers.py

from dataclasses import dataclass
from enum import Enum


class Provider(str, Enum):
    """Supported LLM vendor.

    Values equal names, so ``Provider("GEMINI")`` is a case-sensitive lookup.
    """

    OPEN_AI = "OPEN_AI"
    ANTHROPIC = "ANTHROPIC"
    GEMINI = "GEMINI"


@dataclass(frozen=True)
class ProviderSpec:
    """Environment variable names and default model for one provider."""

    api_key_var: str
    default_model: str
    model_var: str


PROVIDERS: dict[Provider, ProviderSpec] = {
    Provider.OPEN_AI: ProviderSpec(
        api_key_var="OPENAI_API_KEY",
        default_model="gpt-4o",
        model_var="OPENAI_MODEL",
    ),
    Provider.ANTHROPIC: ProviderSpec(
        api_key_var="ANTHROPIC_API_KEY",
        default_model="claude-3-opus-20240307",
        model_var="ANTHROPIC_MODEL",
    ),
    Provider.GEMINI: ProviderSpec(
        api_key_var="GEMINI_API_KEY",
        default_model="gemini-1.5-pro",
        model_var="GEMINI_MODEL",
    ),
}


def get_provider_spec(provider: Provider) -> ProviderSpec:
    return PROVIDERS[provider]


def supported_providers() -> list[str]:
    """Provider names in declaration order."""
    return [p.value for p in Provider]
