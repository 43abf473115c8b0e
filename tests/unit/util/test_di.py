"""Unit tests for provider selection and startup checks."""

import pytest

from journal.config import Settings
from journal.util.di import (
    PROVIDERS,
    ContentProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdContentProvider,
    ProdPersistenceProvider,
    ProviderBase,
    get_provider,
)
from journal.util.error import ConfigurationError, DependencyInjectionError
from journal.util.observability import check_production_secrets
from tests.di import MockContentProvider, MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_used_directly(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_production_implementations(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(ContentProvider) is ProdContentProvider

    def test_mock_implementations(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(ContentProvider, use_mock=True) is MockContentProvider

    def test_missing_mock_implementation(self):
        class MailerProvider(ProviderBase):
            __mock_component__ = "mailer"

        class ProdMailerProvider(MailerProvider):
            __is_mock__ = False

        with pytest.raises(DependencyInjectionError, match="No mock implementation for mailer"):
            get_provider(MailerProvider, use_mock=True)

    def test_every_mockable_component_is_listed(self):
        components = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}

        assert components == {"content", "persistence"}


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"mailer"})


class TestProductionSecrets:
    """Tests for check_production_secrets."""

    def test_placeholder_secrets_refused_in_production(self):
        settings = Settings(environment="production")
        settings.auth.jwt_secret = "CHANGE_ME_IN_PRODUCTION"

        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            check_production_secrets(settings)

    def test_other_environments_are_not_checked(self):
        settings = Settings(environment="development")
        settings.auth.jwt_secret = "CHANGE_ME_IN_PRODUCTION"

        check_production_secrets(settings)
