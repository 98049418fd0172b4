"""Core modules for SQLGen library."""

from .dialects import Dialect, MySQLDialect, PostgresDialect, get_dialect
from .database_manager import DatabaseManager, DatabaseConnectionError, QueryError
from .statement_generator import StatementGenerator

__all__ = [
    "Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "get_dialect",
    "DatabaseManager",
    "DatabaseConnectionError",
    "QueryError",
    "StatementGenerator",
]
