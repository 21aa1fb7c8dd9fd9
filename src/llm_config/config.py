# src/llm_config/config.py

from dataclasses import dataclass, field

from .providers import Provider


@dataclass(frozen=True)
class LLMConfig:
    """Resolved LLM configuration.

    Immutable. Owned by the caller that loaded it.
    The API key is kept out of ``repr`` so configs can be logged.
    """

    provider: Provider
    model: str
    api_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.provider, Provider):
            raise ValueError(f"provider must be a Provider, got {self.provider!r}")
        if not self.model:
            raise ValueError("model must be a non-empty string")
        if not self.api_key:
            raise ValueError("api_key must be a non-empty string")
