# tests/unit/test_config.py

import dataclasses

import pytest

from llm_config.config import LLMConfig
from llm_config.providers import Provider


class TestLLMConfig:
    def test_is_immutable(self) -> None:
        """Fields cannot be reassigned after construction."""
        config = LLMConfig(provider=Provider.GEMINI, model="gemini-1.5-pro", api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.model = "other"  # type: ignore[misc]

    def test_repr_hides_api_key(self) -> None:
        config = LLMConfig(provider=Provider.OPEN_AI, model="gpt-4o", api_key="sk-secret")
        assert "sk-secret" not in repr(config)
        assert "gpt-4o" in repr(config)

    def test_rejects_empty_api_key(self) -> None:
        with pytest.raises(ValueError, match="api_key"):
            LLMConfig(provider=Provider.OPEN_AI, model="gpt-4o", api_key="")

    def test_rejects_empty_model(self) -> None:
        with pytest.raises(ValueError, match="model"):
            LLMConfig(provider=Provider.OPEN_AI, model="", api_key="k")

    def test_rejects_plain_string_provider(self) -> None:
        with pytest.raises(ValueError, match="provider"):
            LLMConfig(provider="OPEN_AI", model="gpt-4o", api_key="k")  # type: ignore[arg-type]
