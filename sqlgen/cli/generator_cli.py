"""
Command-line interface shared by the mysqlgen and psqlgen commands.

Both commands accept the same flags; only the dialect differs.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..core.dialects import Dialect, get_dialect
from ..core.statement_generator import StatementGenerator
from ..utils.db_config import DatabaseConfig, GeneratorConfig, parse_skip_tables


def build_parser(dialect: Dialect) -> argparse.ArgumentParser:
    """Build the argument parser for a dialect's command."""
    strategy = get_dialect(dialect)
    prog = "mysqlgen" if dialect is Dialect.MYSQL else "psqlgen"
    p = argparse.ArgumentParser(
        prog=prog,
        description=f"{prog} is a sql generator: prints INSERT and SELECT-by-PK "
                    f"statements for every table in a {dialect.value} schema")

    p.add_argument("-d", "--dsn",
                   help=f"DSN e.g. {strategy.example_dsn} "
                        f"(default: $DATABASE_URL from environment or .env)")
    p.add_argument("--sqlc", action="store_true",
                   help="Generate comment for sqlc")
    p.add_argument("--skip-tables", type=parse_skip_tables, default=(),
                   help="Comma separated list of tables to skip")
    p.add_argument("--schema",
                   help="Schema to inspect (default: DSN database for MySQL, public for PostgreSQL)")
    p.add_argument("--env", default=".env",
                   help="Path to .env file with DB settings (default: .env)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log catalog queries to stderr")
    return p


def parse_args(dialect: Dialect, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, resolving the DSN from the environment if needed."""
    parser = build_parser(dialect)
    args = parser.parse_args(argv)

    if not args.dsn:
        args.dsn = DatabaseConfig(args.env).load_dsn(*get_dialect(dialect).dsn_env_vars)
    if not args.dsn:
        parser.error("the following arguments are required: -d/--dsn")
    return args


def configure_logging(verbose: bool = False):
    """Send log records to stderr so stdout carries only SQL."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(dialect: Dialect, argv: Optional[List[str]] = None):
    """Main CLI function."""
    args = parse_args(dialect, argv)
    config = GeneratorConfig.from_args(dialect, args)
    configure_logging(config.verbose)
    logging.getLogger(__name__).debug("Running with %r", config)

    try:
        with StatementGenerator(config) as generator:
            output = generator.generate()
        sys.stdout.write(output)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
