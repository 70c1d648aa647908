"""Tests for environment-driven settings and the composition root."""

import pytest
from pydantic import ValidationError

from shopcart.infrastructure.bootstrap import product_repository
from shopcart.infrastructure.config import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("SHOPCART_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHOPCART_SEED_CATALOG", raising=False)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings.log_level == "WARNING"
        assert settings.seed_catalog is True

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["0", "false", "No", "OFF"])
    def test_seed_disabled(self, monkeypatch, raw):
        monkeypatch.setenv("SHOPCART_SEED_CATALOG", raw)
        assert load_settings().seed_catalog is False

    @pytest.mark.parametrize("raw", ["1", "true", "yes"])
    def test_seed_enabled(self, monkeypatch, raw):
        monkeypatch.setenv("SHOPCART_SEED_CATALOG", raw)
        assert load_settings().seed_catalog is True

    def test_unparseable_flag_rejected(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_SEED_CATALOG", "maybe")
        with pytest.raises(ValidationError):
            load_settings()

    def test_keyword_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("SHOPCART_SEED_CATALOG", "0")
        assert Settings(seed_catalog=True).seed_catalog is True


class TestProductRepositoryWiring:

    def test_seeded(self):
        repo = product_repository(Settings(seed_catalog=True))
        assert [p.id for p in repo.list_all()] == [1, 2, 3]

    def test_unseeded(self):
        assert product_repository(Settings(seed_catalog=False)).count() == 0

    def test_each_call_gets_its_own_catalog(self):
        settings = Settings()
        first = product_repository(settings)
        first.save(first.list_all()[0])
        assert product_repository(settings).count() == 3
