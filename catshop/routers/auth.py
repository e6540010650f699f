from fastapi import APIRouter, Cookie, Depends, Response

from catshop.config import settings
from catshop.dependencies import get_user_store
from catshop.schemas.auth import SignInRequest, SignInResponse, SignUpRequest, UserResponse
from catshop.services import auth_service
from catshop.services.user_store import UserStore
from catshop.utils.response import user_response

router = APIRouter(tags=["auth"])

TOKEN_COOKIE = "token"


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.jwt_expires_seconds,
        httponly=True,
        samesite="none" if settings.is_production else "lax",
        secure=settings.is_production,
    )


@router.post("/sign_up", response_model=UserResponse)
async def sign_up(request: SignUpRequest | None = None, store: UserStore = Depends(get_user_store)):
    if request is None:
        request = SignUpRequest()
    user = await auth_service.register(
        store,
        username=request.username,
        password=request.password,
        full_name=request.full_name,
    )
    return user_response(user)


@router.post("/sign_in", response_model=SignInResponse)
async def sign_in(response: Response, request: SignInRequest | None = None, store: UserStore = Depends(get_user_store)):
    if request is None:
        request = SignInRequest()
    user, token = await auth_service.authenticate(store, request.username, request.password)
    _set_session_cookie(response, token)
    return {"user": user_response(user)}


@router.get("/me", response_model=UserResponse)
async def me(token: str | None = Cookie(default=None), store: UserStore = Depends(get_user_store)):
    user = await auth_service.current_user(store, token)
    return user_response(user)
