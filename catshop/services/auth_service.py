import logging

from catshop.models.user import User
from catshop.services.passwords import hash_password, placeholder_password_hash, verify_password
from catshop.services.tokens import check_session_token, create_session_token
from catshop.services.user_store import UserAlreadyExistsError, UserStore
from catshop.utils.exceptions import AuthError, ConflictError, ValidationError

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 8

CREDENTIALS_REQUIRED = "Имя пользователя и пароль обязательны"
INVALID_USERNAME_LENGTH = "Имя пользователя должно быть от 3 до 30 символов"
PASSWORD_TOO_SHORT = "Пароль должен быть не короче 8 символов"
USER_ALREADY_EXISTS = "Пользователь с таким именем уже существует"
INVALID_CREDENTIALS = "Неверное имя пользователя или пароль"
UNAUTHENTICATED = "Не авторизован"


async def register(
    store: UserStore,
    username: str | None,
    password: str | None,
    full_name: str | None = None,
) -> User:
    if not username or not password:
        raise ValidationError(CREDENTIALS_REQUIRED)
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ValidationError(INVALID_USERNAME_LENGTH)
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(PASSWORD_TOO_SHORT)
    if await store.find_by_username(username) is not None:
        raise ConflictError(USER_ALREADY_EXISTS)

    password_hash = await hash_password(password)
    try:
        user = await store.create(username, full_name or "", password_hash)
    except UserAlreadyExistsError:
        logger.info("Registration lost race for username %s", username)
        raise ConflictError(USER_ALREADY_EXISTS)

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate(store: UserStore, username: str | None, password: str | None) -> tuple[User, str]:
    """Check credentials and return the user with a freshly signed session token.

    Unknown usernames and wrong passwords fail with the same error so that a
    caller cannot tell which usernames exist.
    """
    if not username or not password:
        raise ValidationError(CREDENTIALS_REQUIRED)

    user = await store.find_by_username(username)
    password_hash = user.password_hash if user is not None else placeholder_password_hash()
    password_matches = await verify_password(password, password_hash)
    if user is None or not password_matches:
        logger.info("Failed sign-in for username %s", username)
        raise AuthError(INVALID_CREDENTIALS)

    logger.info("User %s signed in", user.username)
    return user, create_session_token(user)


async def current_user(store: UserStore, token: str | None) -> User:
    check = check_session_token(token)
    if not check.is_valid:
        logger.debug("Session token rejected: %s", check.status.value)
        raise AuthError(UNAUTHENTICATED)

    user = await store.find_by_username(check.username)
    if user is None:
        logger.debug("Session token refers to unknown user %s", check.username)
        raise AuthError(UNAUTHENTICATED)
    return user
