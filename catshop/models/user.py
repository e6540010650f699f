from dataclasses import dataclass

from sqlalchemy import Column, Integer, String

from catshop.database import Base


@dataclass(frozen=True)
class User:
    id: int
    username: str
    full_name: str
    password_hash: str


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(30), nullable=False, unique=True)
    full_name = Column(String, nullable=False, default="")
    password_hash = Column(String, nullable=False)

    def to_user(self) -> User:
        return User(
            id=self.id,
            username=self.username,
            full_name=self.full_name,
            password_hash=self.password_hash,
        )
