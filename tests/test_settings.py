from pathlib import Path

import pytest
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from mcp_kusto.settings import KustoSettings, Settings, ToolsSettings


@pytest.fixture
def config_path() -> Path:
    return Path(__file__).parent / "fixtures" / "test.mcp_kusto.toml"


def test_settings(config_path: Path) -> None:
    settings = Settings.build(SettingsConfigDict(toml_file=config_path))
    assert settings.kusto.default_cluster == "help"
    assert settings.kusto.default_database == "Samples"
    assert settings.kusto.request_timeout_seconds == 60
    assert settings.tools.enabled_tool_names() == {"execute_kusto_query", "list_tables"}
    assert settings.logging.level == "DEBUG"
    assert settings.logging.event_log_file == Path("logs/events.jsonl")


def test_settings_defaults() -> None:
    settings = Settings.build(SettingsConfigDict())
    assert settings.kusto.default_cluster is None
    assert settings.kusto.default_database is None
    assert settings.kusto.request_timeout_seconds == 240
    assert settings.tools.enabled_tool_names() == {
        "execute_kusto_query",
        "list_tables",
        "get_table_schema",
    }
    assert settings.logging.level == "INFO"
    assert settings.logging.event_log_file is None


def test_settings_build_restores_model_config(config_path: Path) -> None:
    original = Settings.model_config
    _ = Settings.build(SettingsConfigDict(toml_file=config_path))
    assert Settings.model_config == original


def test_kusto_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KUSTO_DEFAULT_CLUSTER", "foo")
    monkeypatch.setenv("KUSTO_DEFAULT_DATABASE", "bar")
    monkeypatch.setenv("KUSTO_REQUEST_TIMEOUT_SECONDS", "30")

    settings = Settings.build(SettingsConfigDict(env_nested_delimiter="__"))

    assert settings.kusto.default_cluster == "foo"
    assert settings.kusto.default_database == "bar"
    assert settings.kusto.request_timeout_seconds == 30


def test_kusto_settings_empty_environment_is_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KUSTO_DEFAULT_CLUSTER", "")

    assert KustoSettings().default_cluster is None


@pytest.mark.parametrize("timeout", [0, 3601])
def test_request_timeout_bounds(timeout: int) -> None:
    with pytest.raises(ValidationError):
        _ = KustoSettings(request_timeout_seconds=timeout)


def test_tools_settings_enabled_tool_names() -> None:
    tools = ToolsSettings(list_tables=False)
    assert tools.enabled_tool_names() == {"execute_kusto_query", "get_table_schema"}
