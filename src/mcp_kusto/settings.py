from pathlib import Path
from types import TracebackType
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)


class KustoSettings(BaseSettings):
    """Connection defaults, also read from ``KUSTO_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="KUSTO_", env_ignore_empty=True)

    default_cluster: str | None = None
    default_database: str | None = None
    request_timeout_seconds: int = Field(240, ge=1, le=3600)


class ToolsSettings(BaseModel):
    execute_kusto_query: bool = True
    list_tables: bool = True
    get_table_schema: bool = True

    def enabled_tool_names(self) -> set[str]:
        """Return the names of the tools switched on."""
        return {name for name, enabled in self.model_dump().items() if enabled}


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    event_log_file: Path | None = None


class Settings(BaseSettings):
    kusto: KustoSettings = Field(default_factory=KustoSettings)
    tools: ToolsSettings = Field(default_factory=ToolsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            TomlConfigSettingsSource(settings_cls),
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    class _Builder:
        def __init__(self, model_config: SettingsConfigDict) -> None:
            self.model_config = model_config
            self._model_config_default = Settings.model_config

        def __enter__(self) -> "Settings":
            Settings.model_config = self.model_config
            return Settings()

        def __exit__(
            self,
            exc_type: type[BaseException] | None,
            exc_value: BaseException | None,
            traceback: TracebackType | None,
        ) -> None:
            Settings.model_config = self._model_config_default

    @classmethod
    def build(cls, model_config: SettingsConfigDict) -> "Settings":
        with cls._Builder(model_config) as settings:
            return settings
