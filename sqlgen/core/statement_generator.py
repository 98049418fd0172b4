"""
Statement generation core module for SQLGen.

This module provides the StatementGenerator class, which runs the dialect's
catalog queries over one connection and turns the resulting statements into
output blocks, optionally annotated with sqlc ``-- name:`` comments.
"""

import logging
from typing import Iterable, List, Optional

from .database_manager import DatabaseManager
from .dialects import BaseDialect, get_dialect
from ..utils.db_config import GeneratorConfig
from ..utils.naming import Action, generate_comment

LOG = logging.getLogger(__name__)


class StatementGenerator:
    """Boilerplate INSERT / SELECT-by-PK generator for one schema."""

    def __init__(self, config: GeneratorConfig, db_manager: Optional[DatabaseManager] = None):
        """Initialize statement generator.

        Args:
            config: Run configuration
            db_manager: Existing manager to reuse (mainly for tests)
        """
        self.config = config
        self.dialect: BaseDialect = get_dialect(config.dialect)
        self.db_manager = db_manager or DatabaseManager(self.dialect, config.dsn)
        self.schema = config.schema or self.dialect.default_schema(self.db_manager.descriptor)

    def insert_statements(self, skip_tables: Optional[Iterable[str]] = None) -> List[str]:
        """Generate one INSERT statement per table, ordered by table name."""
        skip = self._skip(skip_tables)
        query, params = self.dialect.build_insert_query(self.schema, skip)
        statements = self.db_manager.fetch_statements(query, params)
        LOG.debug("Generated %d INSERT statements for schema %s", len(statements), self.schema)
        return statements

    def select_by_pk_statements(self, skip_tables: Optional[Iterable[str]] = None) -> List[str]:
        """Generate one SELECT-by-primary-key statement per table with a primary key."""
        skip = self._skip(skip_tables)
        query, params = self.dialect.build_select_by_pk_query(self.schema, skip)
        statements = self.db_manager.fetch_statements(query, params)
        LOG.debug("Generated %d SELECT statements for schema %s", len(statements), self.schema)
        return statements

    def render(self, statement: str, action: Action) -> str:
        """Format a statement for output, with its sqlc comment if enabled."""
        if not self.config.sqlc:
            return statement + "\n"
        comment = generate_comment(statement, action, self.dialect)
        return f"{comment}\n{statement}\n\n"

    def generate(self) -> str:
        """Run both catalog queries and return the complete output text.

        Nothing is rendered until both queries have finished, so a failure in
        either one produces no partial output.
        """
        inserts = self.insert_statements()
        selects = self.select_by_pk_statements()

        blocks = [self.render(stmt, Action.CREATE) for stmt in inserts]
        blocks.extend(self.render(stmt, Action.READ) for stmt in selects)
        return "".join(blocks)

    def _skip(self, skip_tables: Optional[Iterable[str]]):
        return tuple(self.config.skip_tables if skip_tables is None else skip_tables)

    def close(self):
        """Close database connection."""
        self.db_manager.close_connection()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
