"""
Configuration utilities for SQLGen.

This module resolves the database DSN from the command line, environment
variables or a .env file, and holds the immutable run configuration that is
passed to the generator.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from dotenv import load_dotenv

from .dsn import mask_dsn

if TYPE_CHECKING:
    from ..core.dialects import Dialect


class DatabaseConfig:
    """DSN resolver backed by .env files and environment variables."""

    def __init__(self, env_path: Optional[str] = None):
        """Initialize database configuration.

        Args:
            env_path: Path to .env file (default: .env)
        """
        self.env_path = env_path or ".env"
        self._dsn: Optional[str] = None

    def load_dsn(self, *env_names: str, override: bool = False) -> Optional[str]:
        """Load a DSN from the .env file and environment variables.

        Args:
            *env_names: Dialect specific variable names tried after DATABASE_URL
            override: Whether to override existing env vars with .env values

        Returns:
            DSN string, or None if no variable is set
        """
        if self.env_path and os.path.exists(self.env_path):
            load_dotenv(self.env_path, override=override)

        self._dsn = self._get_env_var("DATABASE_URL", *env_names, "DB_URL")
        return self._dsn

    def _get_env_var(self, *names: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable by trying multiple names."""
        for name in names:
            value = os.getenv(name)
            if value:
                return value
        return default

    def __repr__(self) -> str:
        dsn = mask_dsn(self._dsn) if self._dsn else None
        return f"DatabaseConfig(env_path='{self.env_path}', dsn={dsn!r})"


def parse_skip_tables(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated table list, trimming blanks and duplicates.

    >>> parse_skip_tables("users, posts , ,users")
    ('users', 'posts')
    """
    if not value:
        return ()
    seen = []
    for name in value.split(","):
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return tuple(seen)


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for a single generator run, built once from CLI arguments."""

    dialect: "Dialect"
    dsn: str
    sqlc: bool = False
    skip_tables: Tuple[str, ...] = ()
    schema: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "skip_tables", _as_tuple(self.skip_tables))

    @classmethod
    def from_args(cls, dialect, args) -> "GeneratorConfig":
        """Build configuration from an argparse namespace."""
        return cls(
            dialect=dialect,
            dsn=args.dsn,
            sqlc=args.sqlc,
            skip_tables=args.skip_tables,
            schema=args.schema,
            verbose=args.verbose,
        )

    def __repr__(self) -> str:
        return (
            f"GeneratorConfig(dialect={self.dialect.value!r}, dsn={mask_dsn(self.dsn)!r}, "
            f"sqlc={self.sqlc}, skip_tables={self.skip_tables}, schema={self.schema!r})"
        )


def _as_tuple(value) -> Tuple[str, ...]:
    if isinstance(value, str):
        return parse_skip_tables(value)
    return tuple(value or ())
