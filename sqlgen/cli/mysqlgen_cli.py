"""
Command-line entry point for MySQL schemas.

Example:
    mysqlgen --dsn 'root:secret@tcp(localhost:3306)/app' --sqlc --skip-tables schema_migrations
"""

from typing import List, Optional

from ..core.dialects import Dialect
from .generator_cli import main as run


def main(argv: Optional[List[str]] = None):
    """Run the generator against a MySQL database."""
    run(Dialect.MYSQL, argv)


if __name__ == "__main__":
    main()
