from catshop.models.user import User, UserRecord

__all__ = ["User", "UserRecord"]
