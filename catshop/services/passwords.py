import functools

import bcrypt
from fastapi.concurrency import run_in_threadpool

from catshop.config import settings

# bcrypt only reads the first 72 bytes of its input and newer releases raise
# instead of truncating silently.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password_sync(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode()


@functools.lru_cache(maxsize=None)
def _placeholder_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"placeholder-password", bcrypt.gensalt(rounds=rounds)).decode()


def placeholder_password_hash() -> str:
    """A real digest to verify against when the user does not exist, so that
    unknown usernames cost the same bcrypt work as wrong passwords."""
    return _placeholder_hash(settings.bcrypt_rounds)


def verify_password_sync(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False


async def hash_password(password: str) -> str:
    return await run_in_threadpool(hash_password_sync, password)


async def verify_password(password: str, password_hash: str) -> bool:
    return await run_in_threadpool(verify_password_sync, password, password_hash)
