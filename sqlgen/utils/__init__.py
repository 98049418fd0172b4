"""Utility modules for SQLGen library."""

from .dsn import ParseError, parse_dsn, parse_mysql_dsn
from .naming import Action, TableNameError, generate_comment, get_table_name, singularize, snake_to_pascal
from .db_config import DatabaseConfig, GeneratorConfig, parse_skip_tables

__all__ = [
    "ParseError",
    "parse_dsn",
    "parse_mysql_dsn",
    "Action",
    "TableNameError",
    "generate_comment",
    "get_table_name",
    "singularize",
    "snake_to_pascal",
    "DatabaseConfig",
    "GeneratorConfig",
    "parse_skip_tables",
]
