"""Unit tests for ControlTableSettings."""

import pytest

from scrape_control.settings import ConfigSource, ControlTableSettings


def test_defaults_from_empty_environment():
    settings = ControlTableSettings.from_env({})

    assert settings.table_name is None
    assert settings.region == "eu-west-1"
    assert settings.config_source == ConfigSource.STATIC
    assert settings.category_page_url == "https://www.tesco.com/groceries/en-GB/shop"
    assert settings.nav_selector == ".current li"
    assert settings.request_timeout == 30.0
    assert settings.require_targets is False
    assert settings.chain_targets is False
    assert settings.wait_for_table is True


def test_values_from_environment():
    settings = ControlTableSettings.from_env(
        {
            "CONTROL_TABLE_NAME": "scrape-control",
            "AWS_REGION": "us-west-2",
            "CONTROL_CONFIG_SOURCE": "LIVE",
            "CONTROL_CATEGORY_PAGE_URL": "https://example.com/shop",
            "CONTROL_NAV_SELECTOR": "nav .active li",
            "CONTROL_REQUEST_TIMEOUT": "5",
            "CONTROL_REQUIRE_TARGETS": "true",
            "CONTROL_CHAIN_TARGETS": "yes",
            "CONTROL_WAIT_FOR_TABLE": "0",
        }
    )

    assert settings.table_name == "scrape-control"
    assert settings.region == "us-west-2"
    assert settings.config_source == ConfigSource.LIVE
    assert settings.category_page_url == "https://example.com/shop"
    assert settings.nav_selector == "nav .active li"
    assert settings.request_timeout == 5.0
    assert settings.require_targets is True
    assert settings.chain_targets is True
    assert settings.wait_for_table is False


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("CONTROL_TABLE_NAME", "env-table")

    assert ControlTableSettings.from_env().table_name == "env-table"


def test_invalid_config_source():
    with pytest.raises(ValueError, match="CONTROL_CONFIG_SOURCE"):
        ControlTableSettings.from_env({"CONTROL_CONFIG_SOURCE": "database"})


def test_invalid_timeout():
    with pytest.raises(ValueError, match="CONTROL_REQUEST_TIMEOUT"):
        ControlTableSettings.from_env({"CONTROL_REQUEST_TIMEOUT": "soon"})


def test_non_positive_timeout():
    with pytest.raises(ValueError, match="positive"):
        ControlTableSettings.from_env({"CONTROL_REQUEST_TIMEOUT": "0"})


def test_invalid_boolean():
    with pytest.raises(ValueError, match="CONTROL_CHAIN_TARGETS"):
        ControlTableSettings.from_env({"CONTROL_CHAIN_TARGETS": "maybe"})


class TestRequireTableName:
    """Tests for table name resolution."""

    def test_explicit_argument_wins(self):
        settings = ControlTableSettings(table_name="from-env")
        assert settings.require_table_name("from-event") == "from-event"

    def test_falls_back_to_settings(self):
        settings = ControlTableSettings(table_name="from-env")
        assert settings.require_table_name() == "from-env"

    def test_missing(self):
        with pytest.raises(ValueError, match="Control table name not provided"):
            ControlTableSettings().require_table_name()
