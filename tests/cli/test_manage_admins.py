"""Admin CLI — commands run against a throwaway SQLite file.

Invariants:
    - success exits 0; any CatalogError exits 1 with its message
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from typer.testing import CliRunner

from catalog_api.config import get_settings
from catalog_api.db.base import Base
from catalog_api.manage_admins import cli

runner = CliRunner()


async def _create_schema(url: str) -> None:
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@pytest.fixture
def cli_database(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    asyncio.run(_create_schema(url))
    yield url
    get_settings.cache_clear()


def test_add_then_list(cli_database):
    """Added admin shows up in the listing."""
    res = runner.invoke(cli, ["add", "root"], input="pa55word\npa55word\n")
    assert res.exit_code == 0, res.output
    assert "Created admin 'root'" in res.output

    res = runner.invoke(cli, ["list"])
    assert res.exit_code == 0
    assert "root" in res.output


def test_add_duplicate_fails(cli_database):
    """Duplicate add exits 1 with the conflict message."""
    runner.invoke(cli, ["add", "root"], input="pa55word\npa55word\n")
    res = runner.invoke(cli, ["add", "root"], input="pa55word\npa55word\n")
    assert res.exit_code == 1
    assert "already exists" in res.output


def test_passwd_unknown_admin_fails(cli_database):
    """Changing an unknown admin's password exits 1."""
    res = runner.invoke(cli, ["passwd", "ghost"], input="pa55word\npa55word\n")
    assert res.exit_code == 1
    assert "not found" in res.output


def test_delete_then_list_is_empty(cli_database):
    """Deleting the only admin leaves an empty listing."""
    runner.invoke(cli, ["add", "root"], input="pa55word\npa55word\n")
    res = runner.invoke(cli, ["delete", "root"])
    assert res.exit_code == 0
    res = runner.invoke(cli, ["list"])
    assert "No admins" in res.output
