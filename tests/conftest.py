import pytest

from mcp_kusto.json_converter import KustoJsonConverter


@pytest.fixture(autouse=True)
def _clear_kusto_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer or CI environment defaults out of the tests."""
    for name in (
        "KUSTO_DEFAULT_CLUSTER",
        "KUSTO_DEFAULT_DATABASE",
        "KUSTO_REQUEST_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def json_converter() -> KustoJsonConverter:
    return KustoJsonConverter()
