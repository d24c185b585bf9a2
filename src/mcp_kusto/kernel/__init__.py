"""Kernel module for domain layer types and logic."""

from .cluster import ClusterUrl, normalize_cluster_url, token_scope
from .data_processing import DataProcessingResult, RowProcessingResult
from .table_metadata import Database, Table, TableColumn, TableSchema, TableSummary

__all__ = [
    "ClusterUrl",
    "DataProcessingResult",
    "Database",
    "RowProcessingResult",
    "Table",
    "TableColumn",
    "TableSchema",
    "TableSummary",
    "normalize_cluster_url",
    "token_scope",
]
