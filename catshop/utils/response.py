from catshop.models.user import User


def error_response(message: str) -> dict:
    return {"message": message}


def user_response(user: User) -> dict:
    """Public projection of a user; the password hash never leaves the service."""
    return {"id": user.id, "username": user.username, "full_name": user.full_name}
