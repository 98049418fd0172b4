"""Tests for configuration helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sqlgen.core.dialects import Dialect
from sqlgen.utils.db_config import DatabaseConfig, GeneratorConfig, parse_skip_tables


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", ()),
        (None, ()),
        ("users", ("users",)),
        ("users,posts,comments", ("users", "posts", "comments")),
        ("users, posts , comments", ("users", "posts", "comments")),
        ("users,,users, ", ("users",)),
    ],
)
def test_parse_skip_tables(value: str | None, expected: tuple[str, ...]) -> None:
    assert parse_skip_tables(value) == expected


def test_generator_config_is_immutable() -> None:
    config = GeneratorConfig(dialect=Dialect.MYSQL, dsn="root@tcp(db)/app")

    with pytest.raises(AttributeError):
        config.sqlc = True  # type: ignore[misc]


def test_generator_config_normalizes_string_skip_list() -> None:
    config = GeneratorConfig(dialect=Dialect.MYSQL, dsn="root@tcp(db)/app", skip_tables="tags")

    assert config.skip_tables == ("tags",)


def test_generator_config_accepts_skip_list_sequences() -> None:
    config = GeneratorConfig(dialect=Dialect.MYSQL, dsn="root@tcp(db)/app", skip_tables=["users", "posts"])

    assert config.skip_tables == ("users", "posts")


def test_generator_config_repr_masks_password() -> None:
    config = GeneratorConfig(dialect=Dialect.POSTGRES, dsn="postgres://app:hunter2@db/app")

    assert "hunter2" not in repr(config)
    assert "app:***@db/app" in repr(config)


def test_database_config_prefers_database_url(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(os, "environ", {"MYSQL_URL": "mysql://fallback/app"})
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=mysql://primary/app\n")

    config = DatabaseConfig(str(env_file))

    assert config.load_dsn("MYSQL_URL") == "mysql://primary/app"


def test_database_config_falls_back_to_dialect_variable(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(os, "environ", {"POSTGRES_URL": "postgres://u:secret@db/app"})

    config = DatabaseConfig(str(tmp_path / "absent.env"))

    assert config.load_dsn("POSTGRES_URL") == "postgres://u:secret@db/app"
    assert "secret" not in repr(config)


def test_database_config_without_any_dsn(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(os, "environ", {})

    assert DatabaseConfig(str(tmp_path / "absent.env")).load_dsn() is None
