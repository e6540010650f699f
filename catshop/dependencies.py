from fastapi import Request

from catshop.services.user_store import UserStore


async def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
