"""
Naming utilities for sqlc comment generation.

This module recovers table names from generated SQL and turns them into the
query names used in ``-- name: ...`` directives, e.g. ``users`` becomes
``CreateUser`` or ``GetUserByPk``.
"""

import re
from enum import Enum
from typing import Union

_INSERT_RE = re.compile(r"INSERT\s+INTO\s+([^\s()]+)", re.IGNORECASE)
_FROM_RE = re.compile(r"\bFROM\s+([^\s()]+)", re.IGNORECASE)

_ES_SUFFIXES = ("sses", "shes", "ches", "xes", "zes")


class TableNameError(ValueError):
    """Raised when no table name can be found in a SQL statement."""


class Action(str, Enum):
    """Kind of query a sqlc comment describes."""

    CREATE = "create"
    READ = "read"


def get_table_name(sql: str) -> str:
    """Extract the table name from an INSERT or SELECT statement.

    The token after ``INSERT INTO`` is preferred; otherwise the token after
    ``FROM`` is used. Matching is case-insensitive and the result is
    lower-cased.

    Args:
        sql: Generated SQL statement

    Returns:
        Table name without identifier quoting

    Raises:
        TableNameError: If neither pattern matches
    """
    statement = sql.strip()
    match = _INSERT_RE.search(statement) or _FROM_RE.search(statement)
    if not match:
        raise TableNameError(f"failed to extract table name from SQL: {statement}")
    return match.group(1).strip('`"').lower()


def snake_to_pascal(name: str) -> str:
    """Convert snake_case to PascalCase, e.g. ``user_profile`` -> ``UserProfile``."""
    return "".join(word.capitalize() for word in name.split("_") if word)


def singularize(word: str) -> str:
    """Naively singularize an English plural.

    Only trailing ``s``/``es`` are handled; irregular plurals come out wrong
    (``categories`` -> ``categorie``).
    """
    lower = word.lower()
    if lower.endswith(_ES_SUFFIXES):
        return word[:-2]
    if lower.endswith("ss"):
        return word
    if lower.endswith("s"):
        return word[:-1]
    return word


def generate_comment(statement: str, action: Union[Action, str], dialect) -> str:
    """Build the sqlc ``-- name:`` directive for a generated statement.

    Args:
        statement: Generated INSERT or SELECT statement
        action: ``create`` for INSERTs, ``read`` for SELECT-by-PK
        dialect: Dialect strategy providing the cardinality suffix

    Returns:
        Comment line such as ``-- name: CreateUser :exec``

    Raises:
        ValueError: If ``action`` is not a known action
        TableNameError: If the statement has no recognisable table name
    """
    action = Action(action)
    table = snake_to_pascal(singularize(get_table_name(statement)))
    suffix = dialect.comment_suffix(action)

    if action is Action.CREATE:
        return f"-- name: Create{table} :{suffix}"
    return f"-- name: Get{table}ByPk :{suffix}"
