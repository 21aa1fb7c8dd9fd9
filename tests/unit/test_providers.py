# tests/unit/test_providers.py

import pytest

from llm_config.providers import (
    PROVIDERS,
    Provider,
    ProviderSpec,
    get_provider_spec,
    supported_providers,
)


def test_table_covers_every_provider() -> None:
    assert set(PROVIDERS) == set(Provider)


def test_supported_providers_order() -> None:
    assert supported_providers() == ["OPEN_AI", "ANTHROPIC", "GEMINI"]


def test_provider_compares_to_its_name() -> None:
    assert Provider.GEMINI == "GEMINI"
    assert Provider("OPEN_AI") is Provider.OPEN_AI


def test_unknown_provider_raises() -> None:
    with pytest.raises(ValueError):
        Provider("open_ai")


def test_get_provider_spec() -> None:
    assert get_provider_spec(Provider.ANTHROPIC) == ProviderSpec(
        api_key_var="ANTHROPIC_API_KEY",
        default_model="claude-3-opus-20240307",
        model_var="ANTHROPIC_MODEL",
    )


def test_spec_is_frozen() -> None:
    spec = get_provider_spec(Provider.OPEN_AI)
    with pytest.raises(AttributeError):
        spec.default_model = "gpt-3.5-turbo"  # type: ignore[misc]


def test_package_exports_provider_helpers() -> None:
    import llm_config

    assert llm_config.supported_providers is supported_providers
    assert llm_config.get_provider_spec is get_provider_spec
