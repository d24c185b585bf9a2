from pydantic import Field, FilePath
from pydantic_settings import BaseSettings, SettingsConfigDict


class Cli(BaseSettings):
    model_config = SettingsConfigDict(
        cli_parse_args=True,
        cli_prog_name="mcp-kusto",
    )

    config: FilePath | None = Field(
        None,
        description="TOML file with [kusto], [tools] and [logging] sections",
    )
