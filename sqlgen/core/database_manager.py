"""
Database management utilities for SQLGen.

This module owns the single catalog connection used by a generator run and
runs read-only queries against it. MySQL connections go through
mysql-connector-python, PostgreSQL connections through psycopg.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import mysql.connector
import psycopg
from psycopg.rows import dict_row

from .dialects import BaseDialect, Dialect

LOG = logging.getLogger(__name__)

# Driver style parameters mysql.connector understands directly
MYSQL_PASSTHROUGH_PARAMS = {"charset", "collation", "ssl_ca", "ssl_cert", "ssl_key"}

# GROUP_CONCAT truncates at 1024 bytes by default
MYSQL_GROUP_CONCAT_MAX_LEN = 1024 * 1024


class DatabaseConnectionError(RuntimeError):
    """Raised when the catalog connection cannot be opened."""


class QueryError(RuntimeError):
    """Raised when a catalog query or row fetch fails."""


class DatabaseManager:
    """Catalog connection manager for a single dialect."""

    def __init__(self, dialect: BaseDialect, dsn: str):
        """Initialize database manager.

        Args:
            dialect: Dialect strategy the connection belongs to
            dsn: Connection string as given on the command line
        """
        self.dialect = dialect
        self.dsn = dsn
        self.descriptor = dialect.parse_connection(dsn)
        self._connection: Optional[Any] = None

    def get_connection(self):
        """Get database connection, creating it if necessary.

        Returns:
            Active driver connection

        Raises:
            DatabaseConnectionError: If the driver refuses to connect
        """
        if self._connection is None:
            LOG.debug("Opening %s connection to %s", self.dialect.dialect.value,
                      self.descriptor.get("host") or self.descriptor.get("socket", "localhost"))
            if self.dialect.dialect is Dialect.MYSQL:
                self._connection = self._connect_mysql()
            else:
                self._connection = self._connect_postgres()
        return self._connection

    def _connect_mysql(self):
        kwargs = mysql_connect_kwargs(self.descriptor)
        try:
            connection = mysql.connector.connect(**kwargs)
            cursor = connection.cursor()
            try:
                cursor.execute(f"SET SESSION group_concat_max_len = {MYSQL_GROUP_CONCAT_MAX_LEN}")
            finally:
                cursor.close()
        except mysql.connector.Error as exc:
            raise DatabaseConnectionError(f"failed to connect to MySQL: {exc}") from exc
        return connection

    def _connect_postgres(self):
        try:
            connection = psycopg.connect(self.dsn, row_factory=dict_row)
        except psycopg.Error as exc:
            raise DatabaseConnectionError(f"failed to connect to PostgreSQL: {exc}") from exc
        return connection

    def close_connection(self):
        """Close database connection if open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def execute_query(self, query: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Execute a SELECT query and return results.

        Args:
            query: SQL query string
            params: Named query parameters

        Returns:
            List of result rows as dictionaries

        Raises:
            QueryError: If the query or fetching its rows fails
        """
        conn = self.get_connection()
        LOG.debug("Executing catalog query with params %s", params)
        if self.dialect.dialect is Dialect.MYSQL:
            try:
                cursor = conn.cursor(dictionary=True)
                try:
                    cursor.execute(query, params)
                    rows = cursor.fetchall()
                finally:
                    cursor.close()
            except mysql.connector.Error as exc:
                raise QueryError(f"catalog query failed: {exc}") from exc
        else:
            try:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    rows = cur.fetchall()
            except psycopg.Error as exc:
                raise QueryError(f"catalog query failed: {exc}") from exc

        LOG.debug("Catalog query returned %d rows", len(rows))
        return rows

    def fetch_statements(self, query: str, params: Optional[Mapping[str, Any]] = None) -> List[str]:
        """Run a statement-producing catalog query and return the ``statement`` column."""
        statements = []
        for row in self.execute_query(query, params):
            statement = _row_value(row, "statement")
            if isinstance(statement, (bytes, bytearray)):
                statement = statement.decode("utf-8")
            if not isinstance(statement, str):
                raise QueryError(f"unexpected statement value in catalog row: {row!r}")
            statements.append(statement)
        return statements

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close_connection()

    def __repr__(self) -> str:
        """String representation."""
        return f"DatabaseManager(dialect={self.dialect.dialect.value!r}, connected={self._connection is not None})"


def mysql_connect_kwargs(descriptor: Mapping[str, str]) -> Dict[str, Any]:
    """Translate a connection descriptor into ``mysql.connector.connect`` kwargs."""
    kwargs: Dict[str, Any] = {}
    if descriptor.get("socket"):
        kwargs["unix_socket"] = descriptor["socket"]
    else:
        kwargs["host"] = descriptor.get("host") or "localhost"
        if descriptor.get("port"):
            kwargs["port"] = int(descriptor["port"])
    for key in ("user", "password", "database"):
        if key in descriptor:
            kwargs[key] = descriptor[key]

    known = {"protocol", "host", "port", "socket", "user", "password", "database"}
    for key, value in descriptor.items():
        if key in known:
            continue
        if key in MYSQL_PASSTHROUGH_PARAMS:
            kwargs[key] = value
        else:
            LOG.warning("Ignoring unsupported MySQL DSN parameter %r", key)
    return kwargs


def _row_value(row, key: str):
    """Read a column from dict rows, or the last column from tuple rows."""
    if isinstance(row, Mapping):
        # MySQL may report aliases in upper case
        if key in row:
            return row[key]
        return row.get(key.upper())
    return row[-1]
