"""User storage.

Both stores make check-and-insert a single atomic step: ``create`` refuses a
username that is already taken by raising :class:`UserAlreadyExistsError`.
"""

import asyncio
import itertools
import logging
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from catshop.config import Settings
from catshop.database import build_engine, build_session_factory, create_tables
from catshop.models.user import User, UserRecord

logger = logging.getLogger(__name__)


class UserAlreadyExistsError(Exception):
    def __init__(self, username: str):
        super().__init__(f"username already taken: {username}")
        self.username = username


class UserStore(Protocol):
    async def find_by_username(self, username: str) -> User | None: ...

    async def create(self, username: str, full_name: str, password_hash: str) -> User: ...

    async def count(self) -> int: ...


class InMemoryUserStore:
    """Process-local store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    async def create(self, username: str, full_name: str, password_hash: str) -> User:
        async with self._lock:
            if username in self._users:
                raise UserAlreadyExistsError(username)
            user = User(
                id=next(self._ids),
                username=username,
                full_name=full_name,
                password_hash=password_hash,
            )
            self._users[username] = user
        return user

    async def count(self) -> int:
        return len(self._users)


class SqlUserStore:
    """Database-backed store; ids and uniqueness come from the ``users`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = build_session_factory(engine)

    async def create_schema(self) -> None:
        await create_tables(self._engine)

    async def dispose(self) -> None:
        await self._engine.dispose()

    async def find_by_username(self, username: str) -> User | None:
        async with self._session_factory() as session:
            result = await session.execute(select(UserRecord).where(UserRecord.username == username))
            record = result.scalars().first()
        return record.to_user() if record is not None else None

    async def create(self, username: str, full_name: str, password_hash: str) -> User:
        async with self._session_factory() as session:
            record = UserRecord(username=username, full_name=full_name, password_hash=password_hash)
            session.add(record)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                raise UserAlreadyExistsError(username) from exc
            await session.refresh(record)
            return record.to_user()

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count()).select_from(UserRecord))
            return result.scalar_one()


def build_user_store(config: Settings) -> UserStore:
    if config.user_store == "memory":
        return InMemoryUserStore()
    if config.user_store == "sql":
        return SqlUserStore(build_engine(config.database_url))
    raise ValueError(f"Unknown user store: {config.user_store!r}")
