"""MCP server for Azure Data Explorer (Kusto)."""
