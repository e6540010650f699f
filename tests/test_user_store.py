import asyncio
import os
import subprocess
import sys

import pytest
import pytest_asyncio

from catshop.config import Settings
from catshop.database import build_engine
from catshop.services.user_store import (
    InMemoryUserStore,
    SqlUserStore,
    UserAlreadyExistsError,
    build_user_store,
)


@pytest_asyncio.fixture
async def sql_store():
    store = SqlUserStore(build_engine("sqlite+aiosqlite:///:memory:"))
    await store.create_schema()
    yield store
    await store.dispose()


@pytest.mark.asyncio
async def test_memory_store_assigns_sequential_ids():
    store = InMemoryUserStore()
    first = await store.create("barsik", "Барсик", "hash-1")
    second = await store.create("murzik", "", "hash-2")

    assert (first.id, second.id) == (1, 2)
    assert await store.count() == 2


@pytest.mark.asyncio
async def test_memory_store_find_by_username():
    store = InMemoryUserStore()
    created = await store.create("barsik", "Барсик", "hash-1")

    assert await store.find_by_username("barsik") == created
    assert await store.find_by_username("Barsik") is None
    assert await store.find_by_username("nobody") is None


@pytest.mark.asyncio
async def test_memory_store_rejects_duplicate_without_consuming_id():
    store = InMemoryUserStore()
    await store.create("barsik", "", "hash-1")

    with pytest.raises(UserAlreadyExistsError):
        await store.create("barsik", "", "hash-2")

    nxt = await store.create("murzik", "", "hash-3")
    assert nxt.id == 2
    assert (await store.find_by_username("barsik")).password_hash == "hash-1"


@pytest.mark.asyncio
async def test_memory_store_concurrent_creates_keep_usernames_unique():
    store = InMemoryUserStore()

    results = await asyncio.gather(
        *(store.create("barsik", "", f"hash-{i}") for i in range(10)),
        return_exceptions=True,
    )

    created = [r for r in results if not isinstance(r, Exception)]
    assert len(created) == 1
    assert all(isinstance(r, UserAlreadyExistsError) for r in results if r not in created)
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_sql_store_create_and_find(sql_store):
    user = await sql_store.create("barsik", "Барсик", "hash-1")

    assert user.id == 1
    found = await sql_store.find_by_username("barsik")
    assert found == user
    assert await sql_store.find_by_username("nobody") is None
    assert await sql_store.count() == 1


@pytest.mark.asyncio
async def test_sql_store_rejects_duplicate_username(sql_store):
    await sql_store.create("barsik", "", "hash-1")

    with pytest.raises(UserAlreadyExistsError):
        await sql_store.create("barsik", "", "hash-2")
    assert await sql_store.count() == 1


def test_build_user_store_selects_implementation():
    assert isinstance(build_user_store(Settings(user_store="memory")), InMemoryUserStore)
    assert isinstance(build_user_store(Settings(user_store="sql")), SqlUserStore)
    with pytest.raises(ValueError):
        build_user_store(Settings(user_store="redis"))


def test_memory_store_ignores_database_url():
    config = Settings(user_store="memory", database_url="postgresql+nosuchdriver://u:p@db/cats")
    assert isinstance(build_user_store(config), InMemoryUserStore)


def test_app_imports_in_memory_mode_with_unavailable_database_driver():
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env = dict(
        os.environ,
        USER_STORE="memory",
        DATABASE_URL="postgresql+nosuchdriver://u:p@db/cats",
        PYTHONPATH=root,
    )
    result = subprocess.run(
        [sys.executable, "-c", "import catshop.main"],
        env=env,
        cwd=root,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
